"""
Admin product management views.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.permissions import IsAdmin
from apps.common.utils import paginated_response, success_response
from ..models import Product
from ..serializers import (
    AssignProductSerializer, ProductAssignmentSerializer, ProductSerializer
)
from ..services import ProductService


class AdminProductListView(APIView):
    """List products or create one with its activities"""
    permission_classes = [IsAdmin]

    def get(self, request):
        products = Product.objects.prefetch_related('activities', 'assignments')
        keyword = request.GET.get('keyword', '')
        if keyword:
            products = products.filter(name__icontains=keyword)
        user_id = request.GET.get('user', '')
        if user_id.isdigit():
            products = products.filter(assignments__user_id=int(user_id))
        return paginated_response(products, ProductSerializer, request, 'Products retrieved')

    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = ProductService.create_product(request.user, serializer.validated_data)
        return success_response(
            ProductSerializer(product).data, 'Product created successfully', status.HTTP_201_CREATED
        )


class AdminProductDetailView(APIView):
    """Update or delete a product"""
    permission_classes = [IsAdmin]

    def patch(self, request, product_id):
        product = ProductService.get_product(product_id)
        serializer = ProductSerializer(product, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        product = ProductService.update_product(request.user, product, serializer.validated_data)
        return success_response(ProductSerializer(product).data, 'Product updated successfully')

    def delete(self, request, product_id):
        ProductService.delete_product(request.user, product_id)
        return success_response(None, 'Product deleted successfully')


class AssignProductView(APIView):
    """Assign a product to a user"""
    permission_classes = [IsAdmin]

    def post(self, request, product_id):
        serializer = AssignProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        assignment = ProductService.assign(
            request.user, product_id, serializer.validated_data['user_id']
        )
        return success_response(
            ProductAssignmentSerializer(assignment).data, 'Product assigned successfully'
        )


class UnassignProductView(APIView):
    """Remove a product from a user"""
    permission_classes = [IsAdmin]

    def post(self, request, product_id):
        serializer = AssignProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ProductService.unassign(request.user, product_id, serializer.validated_data['user_id'])
        return success_response(None, 'Product unassigned successfully')
