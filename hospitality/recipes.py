"""Recipes and the ingredient builder used by the recipe form."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional

from .constants import RECIPE_SEARCH_FIELDS
from .notifications import Notifier
from .store import Draft, IdFactory, RecordManager, new_id
from .utils import Number, format_quantity
from .validation import ValidationError, require_fields, require_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ingredient:
    item: str
    quantity: Number
    unit: str

    def scaled(self, factor: Number) -> "Ingredient":
        return Ingredient(self.item, self.quantity * factor, self.unit)

    def describe(self) -> str:
        return f"{format_quantity(self.quantity)} {self.unit} of {self.item}"


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    description: str = ""
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)
    servings: int = 1
    category: str = ""


class RecipeManager(RecordManager[Recipe]):
    record_type = Recipe
    label = "Recipe"
    required_fields = ("name", "category", "ingredients")
    search_fields = RECIPE_SEARCH_FIELDS
    draft_defaults: ClassVar[Mapping[str, Any]] = {
        "name": "",
        "description": "",
        "ingredients": [],
        "servings": 1,
        "category": "",
    }
    required_message = "Please fill in all required fields and add at least one ingredient."

    def __init__(
        self,
        records: Iterable[Recipe] = (),
        *,
        id_factory: IdFactory = new_id,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(records, id_factory=id_factory, notifier=notifier)
        self.ingredient_draft = Draft({"item": "", "quantity": 0, "unit": ""})

    # ------------------------------------------------------------------
    # Ingredient builder
    @property
    def draft_ingredients(self) -> list[Ingredient]:
        return list(self.draft.values["ingredients"])

    def add_ingredient(self, values: Optional[Mapping[str, Any]] = None) -> Ingredient:
        """Append the current ingredient draft to the recipe draft.

        Duplicate ingredient names are kept as separate lines.
        """

        data = dict(self.ingredient_draft.values)
        if values:
            data.update(values)
        require_fields(data, ("item", "quantity", "unit"), message="Please fill in all ingredient fields.")
        require_number(data["quantity"], "quantity", minimum=0)
        ingredient = Ingredient(str(data["item"]).strip(), data["quantity"], str(data["unit"]).strip())
        self.draft.values["ingredients"] = self.draft_ingredients + [ingredient]
        self.ingredient_draft.reset()
        return ingredient

    def remove_ingredient(self, index: int) -> Optional[Ingredient]:
        ingredients = self.draft_ingredients
        if not 0 <= index < len(ingredients):
            return None
        removed = ingredients.pop(index)
        self.draft.values["ingredients"] = ingredients
        return removed

    # ------------------------------------------------------------------
    # RecordManager hooks
    def validate(self, values: Mapping[str, Any]) -> None:
        super().validate(values)
        servings = values.get("servings")
        if isinstance(servings, bool) or not isinstance(servings, int) or servings < 1:
            raise ValidationError("Servings must be a whole number of at least 1.")

    def clean(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        cleaned = super().clean(values)
        cleaned["ingredients"] = tuple(cleaned.get("ingredients", ()))
        return cleaned

    def start_edit(self, record_id: str) -> Recipe:
        recipe = super().start_edit(record_id)
        self.draft.values["ingredients"] = list(recipe.ingredients)
        self.ingredient_draft.reset()
        return recipe

    def cancel_edit(self) -> None:
        super().cancel_edit()
        self.ingredient_draft.reset()

    def delete(self, record_id: str) -> bool:
        was_editing = self.draft.editing_id == record_id
        deleted = super().delete(record_id)
        if deleted and was_editing:
            self.ingredient_draft.reset()
        return deleted

    # ------------------------------------------------------------------
    # Sales preview
    def sell(self, recipe_id: str, quantity: Number = 1) -> Optional[list[Ingredient]]:
        """Report the ingredient usage for selling ``quantity`` portions.

        Inventory is not touched; the usage is only returned and announced.
        """

        recipe = self.store.get(recipe_id)
        if recipe is None:
            return None
        usage = [ingredient.scaled(quantity) for ingredient in recipe.ingredients]
        logger.info("Sold %s x %s", quantity, recipe.name)
        self.notifier.notify(
            "Recipe Sold",
            "Ingredients reduced: " + ", ".join(ingredient.describe() for ingredient in usage),
        )
        return usage


SAMPLE_RECIPES = (
    Recipe(
        "1",
        "Pasta Marinara",
        "Classic Italian pasta with tomato sauce",
        (
            Ingredient("Tomatoes", 2, "kg"),
            Ingredient("Olive Oil", 0.1, "liters"),
            Ingredient("Pasta", 1, "kg"),
        ),
        10,
        "Main Course",
    ),
    Recipe(
        "2",
        "Grilled Chicken",
        "Herb-seasoned grilled chicken breast",
        (
            Ingredient("Chicken Breast", 2, "kg"),
            Ingredient("Olive Oil", 0.05, "liters"),
        ),
        8,
        "Main Course",
    ),
)


__all__ = ["Ingredient", "Recipe", "RecipeManager", "SAMPLE_RECIPES"]
