from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from foodsaver.domain.Cookbook import Cookbook
from foodsaver.domain.Recipe import Recipe
from foodsaver.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def get_cookbook(request: Request) -> Cookbook:
    return request.app.state.cookbook


def _require(cookbook: Cookbook, name: str) -> Recipe:
    recipe = cookbook.get_recipe(name)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{name}' not found")
    return recipe


@router.get("")
def list_recipes(request: Request):
    cookbook = get_cookbook(request)
    return {"count": len(cookbook), "names": cookbook.get_all_recipe_names()}


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, request: Request):
    """Add a recipe; a recipe with the same name (any case) is replaced."""
    cookbook = get_cookbook(request)
    replaced = payload.name in cookbook
    recipe = payload.to_recipe()
    cookbook.add_recipe(recipe)
    return {"success": True, "replaced": replaced, "recipe": recipe.to_dict()}


@router.get("/search")
def search_recipes(request: Request, q: Optional[str] = Query(default=None)):
    found = get_cookbook(request).search_recipes(q)
    return {"count": len(found), "recipes": [r.to_dict() for r in found]}


@router.get("/available")
def available_recipes(request: Request):
    """Recipes the storage can currently cover.

    Response JSON structure:
        { "count": <int>, "total": <int>, "recipes": [ {name, description, instructions, servings, ingredients} ] }
    """
    cookbook = get_cookbook(request)
    suggested = cookbook.suggest_recipes(request.app.state.storage)
    return {"count": len(suggested), "total": len(cookbook), "recipes": [r.to_dict() for r in suggested]}


@router.get("/{name}")
def get_recipe(name: str, request: Request):
    return _require(get_cookbook(request), name).to_dict()


@router.delete("/{name}")
def delete_recipe(name: str, request: Request):
    removed = get_cookbook(request).remove_recipe(name)
    if removed is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{name}' not found")
    return {"success": True, "removed": removed.name}


@router.get("/{name}/can-prepare")
def can_prepare(name: str, request: Request):
    cookbook = get_cookbook(request)
    recipe = _require(cookbook, name)
    return {"name": recipe.name, "can_prepare": cookbook.can_prepare_recipe(recipe, request.app.state.storage)}


@router.post("/{name}/prepare")
def prepare(name: str, request: Request):
    recipe = _require(get_cookbook(request), name)
    request.app.state.storage.prepare_recipe(recipe)
    return {"success": True, "prepared": recipe.name}
