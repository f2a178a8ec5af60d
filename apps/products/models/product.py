from django.conf import settings
from django.db import models


class Product(models.Model):
    """A product customers can be assigned; its activities earn points"""
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    is_enabled = models.BooleanField(default=True)
    points_allocation = models.PositiveIntegerField(default=0, help_text="Points budget for this product's activities")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name', 'id']
        indexes = [
            models.Index(fields=['is_enabled']),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"


class Activity(models.Model):
    """An action on a product that is worth a fixed number of points"""
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='activities')
    name = models.CharField(max_length=200)
    points_value = models.PositiveIntegerField()

    class Meta:
        db_table = 'product_activities'
        ordering = ['product_id', 'id']
        verbose_name_plural = 'Activities'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(points_value__gt=0),
                name='product_activities_points_value_positive',
            ),
        ]

    def __str__(self):
        return f"{self.product.name} - {self.name} ({self.points_value} points)"


class ProductAssignment(models.Model):
    """Links a customer to a product they hold"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='product_assignments')
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='assignments')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_assignments'
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'product'], name='unique_product_assignment'),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.product.name}"
