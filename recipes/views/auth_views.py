"""Account endpoints: register, log in, view and edit the signed-in profile."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated

from recipes.serializers import ProfileSerializer
from recipes.services.accounts import AccountService
from recipes.views.view_utils import envelope, request_payload


def _account_body(user, token, request):
    return {"user": ProfileSerializer(user, context={"request": request}).data, "token": token}


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    user, token = AccountService().register(request_payload(request))
    return envelope(_account_body(user, token, request), code=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    user, token = AccountService().login(request.data.get("email"), request.data.get("password"))
    return envelope(_account_body(user, token, request))


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def profile(request):
    """Return or update the caller's own profile; PUT accepts a multipart avatar."""
    user = request.user
    if request.method == 'PUT':
        user = AccountService().update_profile(
            user,
            request_payload(request, exclude=("avatar",)),
            avatar=request.FILES.get("avatar"),
        )
    return envelope(ProfileSerializer(user, context={"request": request}).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    token = AccountService().change_password(
        request.user,
        request.data.get("current_password"),
        request.data.get("new_password"),
    )
    return envelope({"token": token}, message="Password updated")
