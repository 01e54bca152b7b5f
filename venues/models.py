from django.db import models


class Venue(models.Model):
    """Physical location owned by a group; events may be held there."""

    group = models.ForeignKey(
        'groups.Group',
        on_delete=models.CASCADE,
        related_name='venues'
    )

    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    lat = models.FloatField()
    lng = models.FloatField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'venues_venue'
        ordering = ['id']
        indexes = [
            models.Index(fields=['group'], name='venues_venue_group_idx'),
        ]

    def __str__(self):
        return f"{self.address}, {self.city}"
