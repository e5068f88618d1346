"""HTTP handlers (views) for the account directory.

Handlers parse input and call AccountService; domain errors are rendered by
the project exception handler.
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.caller import caller_from_request
from accounts.handlers.serializers import (
    AccountSerializer,
    CompleteProfileSerializer,
    SetAdminSerializer,
)
from accounts.services.account_service import AccountService
from accounts.stores.django_store import DjangoAccountStore


def get_account_service() -> AccountService:
    return AccountService(DjangoAccountStore())


class ProfileView(APIView):
    """Handler for GET /api/me"""

    def get(self, request: Request) -> Response:
        caller = caller_from_request(request, require_member=False)
        account = get_account_service().get_profile(caller)
        return Response(AccountSerializer(account).data)


class CompleteProfileView(APIView):
    """Handler for POST /api/me/profile"""

    def post(self, request: Request) -> Response:
        caller = caller_from_request(request, require_member=False)
        serializer = CompleteProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().complete_profile(
            caller,
            first_name=serializer.validated_data["first_name"],
            last_name=serializer.validated_data["last_name"],
        )
        return Response(AccountSerializer(account).data)


class AccountListView(APIView):
    """Handler for GET /api/accounts"""

    def get(self, request: Request) -> Response:
        caller = caller_from_request(request)
        accounts = get_account_service().list_accounts(caller)
        return Response(AccountSerializer(accounts, many=True).data)


class ApproveAccountView(APIView):
    """Handler for POST /api/accounts/{user_id}/approve"""

    def post(self, request: Request, user_id: str) -> Response:
        caller = caller_from_request(request)
        account = get_account_service().approve(caller, user_id)
        return Response(AccountSerializer(account).data)


class RevokeAccountView(APIView):
    """Handler for POST /api/accounts/{user_id}/revoke"""

    def post(self, request: Request, user_id: str) -> Response:
        caller = caller_from_request(request)
        account = get_account_service().revoke(caller, user_id)
        return Response(AccountSerializer(account).data)


class SetAdminView(APIView):
    """Handler for POST /api/accounts/{user_id}/admin"""

    def post(self, request: Request, user_id: str) -> Response:
        caller = caller_from_request(request)
        serializer = SetAdminSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = get_account_service().set_admin(
            caller, user_id, serializer.validated_data["is_admin"]
        )
        return Response(AccountSerializer(account).data)
