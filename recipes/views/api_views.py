from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from recipes.views.view_utils import envelope


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    """Liveness probe for load balancers and uptime checks."""
    return envelope(status="ok", timestamp=timezone.now().isoformat())
