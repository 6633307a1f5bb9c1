from typing import List, Optional
from fastapi import APIRouter, Body, Path, Query, Depends, Request

from models import GoalCreate, GoalRead, GoalOptions
from services.goal_service import GoalService

router = APIRouter(prefix="/goals", tags=["Goals"])

def get_goal_service(request: Request) -> GoalService:
    """Build the goal service over the store owned by the app"""
    return GoalService(request.app.state.goal_store)


@router.post("",
         status_code=201,
         response_model=GoalRead,
         summary="Create a goal",
         description="Creates a goal. Recurrence and tag are given by name or by their position in the option lists.")
def create_goal(goal: GoalCreate = Body(..., description="Goal to create"),
                service: GoalService = Depends(get_goal_service)):
    """
    Create a goal.

    A named recurrence/tag wins over its index. Indexes past the end of the
    option list select the last option.
    """
    recurrence = goal.recurrence if goal.recurrence is not None else service.recurrence_at(goal.recurrence_index)
    tag = goal.tag if goal.tag is not None else service.tag_at(goal.tag_index)
    return service.create(goal.title, goal.description, recurrence, tag)


@router.get("",
         response_model=List[GoalRead],
         summary="List goals",
         description="Retrieves all goals in creation order, optionally filtered by a title search term.")
def list_goals(search: Optional[str] = Query(None, description="Case-insensitive substring to look for in goal titles."),
               service: GoalService = Depends(get_goal_service)):
    return service.search(search)


@router.get("/options",
         response_model=GoalOptions,
         summary="List goal options",
         description="Returns the ordered recurrence and tag options.")
def list_goal_options(service: GoalService = Depends(get_goal_service)):
    return service.options()


@router.get("/{goal_id}",
         response_model=GoalRead,
         summary="Get a goal",
         description="Retrieves a goal by its unique identifier.")
def get_goal(goal_id: str = Path(..., description="Unique identifier of the goal"),
             service: GoalService = Depends(get_goal_service)):
    return service.get(goal_id)
