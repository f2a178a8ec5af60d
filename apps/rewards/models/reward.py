from django.db import models


class Reward(models.Model):
    """A catalog item users can redeem points for"""
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    points_cost = models.PositiveIntegerField()
    image_url = models.URLField(max_length=500, blank=True, default='')
    available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rewards'
        ordering = ['points_cost', 'id']
        verbose_name = 'Reward'
        verbose_name_plural = 'Rewards'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(points_cost__gt=0),
                name='rewards_points_cost_positive',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.points_cost} points)"
