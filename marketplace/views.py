from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from .models import ProductVariant
from .serializers import AdminProductVariantSerializer, StockAdjustmentSerializer
from .services import InventoryService


class AdminProductVariantViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Consulta de variantes y ajuste manual de stock para el staff."""
    permission_classes = [IsAdminUser]
    queryset = ProductVariant.objects.select_related('product')
    serializer_class = AdminProductVariantSerializer

    @action(detail=True, methods=['patch'], url_path='stock')
    def stock(self, request, pk=None):
        variant = self.get_object()
        serializer = StockAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        variant = InventoryService.adjust_stock(
            variant,
            serializer.validated_data['stock'],
            changed_by=request.user,
            reason=serializer.validated_data['reason'],
        )
        return Response(AdminProductVariantSerializer(variant).data, status=status.HTTP_200_OK)
