"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvariantViolation(DomainException):
    """Caller passed input that breaks an engine precondition"""

    pass


class InvalidAllocationError(InvariantViolation):
    """Allocation ratios or asset weights are malformed"""

    pass


class InvalidScenarioError(InvariantViolation):
    """Scenario definition is missing asset returns"""

    pass


class InvalidAssetsError(InvariantViolation):
    """Asset total before the round is negative or not a whole amount"""

    pass


class ScenarioNotFoundError(DomainException):
    """No scenario in the catalog has the requested id"""

    pass


class GameNotFoundError(DomainException):
    """No active game has the requested id"""

    pass


class GameFlowError(DomainException):
    """Action is not allowed in the game's current phase"""

    pass
