"""
Failures raised by the services. Each carries a stable ``code`` and the HTTP
status the API answers with; ``app.main`` registers the handler that turns
them into JSON responses.
"""


class DomainError(Exception):
    code = "error"
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InsufficientMembers(DomainError):
    code = "insufficient_members"
    default_message = "Need at least 2 users to create prayer teams"


class NoUsersAvailable(DomainError):
    code = "no_users_available"
    default_message = "No users available for scheduling"


class TeamsAlreadyExist(DomainError):
    code = "teams_already_exist"
    status_code = 409
    default_message = "Prayer teams already exist for this week"


class ScheduleConflict(DomainError):
    code = "schedule_conflict"
    status_code = 409
    default_message = "A schedule already exists for this date and day type"


class TeamConflict(DomainError):
    code = "team_conflict"
    status_code = 409
    default_message = "One or both members already have a team for this week"


class MemberNotFound(DomainError):
    code = "member_not_found"
    default_message = "One or both users not found"


class UserNotFound(DomainError):
    code = "user_not_found"
    status_code = 404
    default_message = "User not found"


class NotFound(DomainError):
    code = "not_found"
    status_code = 404
    default_message = "Not found"


class Unauthenticated(DomainError):
    code = "unauthenticated"
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(DomainError):
    code = "forbidden"
    status_code = 403
    default_message = "Admin privileges required"
