from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, Tuple, Union


class WeightedCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Rarity tier name (Common, Uncommon, Rare, Epic, Legendary)")
    color: str = Field("#ffffff", description="Display color, cosmetic only")
    weight: Union[int, float] = Field(..., ge=0, description="Relative draw weight")


class LootTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: Tuple[WeightedCategory, ...] = Field(..., min_length=1, description="Categories in draw order")

    @field_validator("categories")
    @classmethod
    def check_categories(cls, v):
        names = [c.name for c in v]
        if len(set(names)) != len(names):
            raise ValueError("category names must be unique")
        if sum(c.weight for c in v) <= 0:
            raise ValueError("total weight must be greater than zero")
        return v

    @property
    def total_weight(self) -> float:
        return sum(c.weight for c in self.categories)

    def names(self):
        return [c.name for c in self.categories]


class DrawStrip(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Tuple[WeightedCategory, ...] = Field(..., description="Scrolling strip shown before the reveal")
    final_item: WeightedCategory = Field(..., description="Authoritative result, also written into the stop slot")
    final_index: int = Field(40, ge=0, description="Slot the reveal animation stops on")

    @model_validator(mode="after")
    def check_stop_slot(self):
        if self.final_index >= len(self.items):
            raise ValueError("final_index must fall inside the strip")
        if self.items[self.final_index] != self.final_item:
            raise ValueError("stop slot must hold the final item")
        return self


class MintResult(BaseModel):
    success: bool
    stove_id: Optional[int] = Field(None, description="New stove id when minting succeeded")
    error: Optional[str] = None


class LootboxOpening(BaseModel):
    strip: DrawStrip
    type_id: int = Field(..., description="Stove type identifier derived from the final pick")
    owner_id: int
    mint: MintResult
