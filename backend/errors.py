class GoalTrackerError(Exception):
    """Base class for goal tracker errors."""
    pass

class ValidationError(GoalTrackerError):
    """Bad or missing input when creating a goal."""
    pass

class GoalNotFoundError(GoalTrackerError):
    """No goal with the requested id."""
    pass

class StorageError(GoalTrackerError):
    """The database is unavailable or rejected the operation."""
    pass
