"""Builds the explicit Caller from an authenticated DRF request."""

from rest_framework.request import Request

from accounts.domain import Caller, UserId
from accounts.domain.errors import AuthenticationRequiredError


def caller_from_request(request: Request, *, require_member: bool = True) -> Caller:
    """Return the Caller for the request's user.

    Raises:
        AuthenticationRequiredError: If the request is anonymous.
        AccountNotApprovedError: If require_member is set and the account
            is neither approved nor admin.
    """
    user = request.user
    if user is None or not user.is_authenticated:
        raise AuthenticationRequiredError()

    caller = Caller(
        id=UserId(user.pk),
        is_admin=user.is_admin,
        is_approved=user.is_approved,
    )
    if require_member:
        caller.ensure_member()
    return caller
