"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthenticatedError(DomainError):
    """Raised when a mutating operation has no caller identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class AlreadyVotedError(BusinessRuleViolationError):
    """Raised when a user casts a second vote for a project on the same day."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__("Already voted for this project today")


class NoExistingVoteError(BusinessRuleViolationError):
    """Raised when a user retracts a vote they have not cast today."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__("No vote for this project today")


class NoProjectsAvailableError(DomainError):
    """Raised when winner selection has no votes and no projects to pick from."""

    def __init__(self):
        super().__init__("No projects found")


class UntrustedSchedulerError(DomainError):
    """Raised when a scheduled job is invoked by anything but the scheduler."""

    def __init__(self):
        super().__init__("Unauthorized")
