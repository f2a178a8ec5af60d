"""
Product service for product, activity and assignment operations.
"""
from django.contrib.auth import get_user_model
from django.db import transaction

from apps.common.exceptions import NotFound
from apps.common.models import AdminLog
from apps.common.services import AdminLogService

from ..models import Activity, Product, ProductAssignment


class ProductService:
    """Service for product management; every change is written to the admin log"""

    @staticmethod
    def get_product(product_id):
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound('Product not found', product_id=product_id)
        return product

    @staticmethod
    def _create_activities(product, activities_data):
        Activity.objects.bulk_create([
            Activity(product=product, name=item['name'], points_value=item['points_value'])
            for item in activities_data
        ])

    @staticmethod
    def create_product(admin, validated_data):
        """
        Create a new product with its activities.

        Args:
            admin: Admin performing the change
            validated_data: Validated data from serializer

        Returns:
            Product: Created product instance
        """
        activities_data = validated_data.pop('activities', [])
        with transaction.atomic():
            product = Product.objects.create(**validated_data)
            ProductService._create_activities(product, activities_data)
            AdminLogService.append(
                admin, None, AdminLog.ActionType.PRODUCT_CREATED,
                f"Created product '{product.name}' with {len(activities_data)} activities"
            )
        return product

    @staticmethod
    def update_product(admin, instance, validated_data):
        """
        Update an existing product. When ``activities`` is given the
        product's activity list is replaced.
        """
        activities_data = validated_data.pop('activities', None)
        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()

            if activities_data is not None:
                instance.activities.all().delete()
                ProductService._create_activities(instance, activities_data)

            AdminLogService.append(
                admin, None, AdminLog.ActionType.PRODUCT_UPDATED,
                f"Updated product '{instance.name}'"
            )
        return instance

    @staticmethod
    def delete_product(admin, product_id):
        with transaction.atomic():
            product = ProductService.get_product(product_id)
            name = product.name
            product.delete()
            AdminLogService.append(
                admin, None, AdminLog.ActionType.PRODUCT_DELETED,
                f"Deleted product '{name}'"
            )

    @staticmethod
    def _get_user(user_id):
        user = get_user_model().objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound('User not found', user_id=user_id)
        return user

    @staticmethod
    def assign(admin, product_id, user_id):
        """Assign a product to a user; assigning twice is a no-op"""
        with transaction.atomic():
            product = ProductService.get_product(product_id)
            user = ProductService._get_user(user_id)
            assignment, created = ProductAssignment.objects.get_or_create(user=user, product=product)
            if created:
                AdminLogService.append(
                    admin, user, AdminLog.ActionType.PRODUCT_ASSIGNED,
                    f"Assigned product '{product.name}' to {user.email}"
                )
        return assignment

    @staticmethod
    def unassign(admin, product_id, user_id):
        """Remove a product from a user. Raises NotFound if it was not assigned."""
        with transaction.atomic():
            product = ProductService.get_product(product_id)
            user = ProductService._get_user(user_id)
            deleted, _ = ProductAssignment.objects.filter(user=user, product=product).delete()
            if not deleted:
                raise NotFound('Product is not assigned to this user')
            AdminLogService.append(
                admin, user, AdminLog.ActionType.PRODUCT_UNASSIGNED,
                f"Unassigned product '{product.name}' from {user.email}"
            )
