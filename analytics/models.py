"""
Site Analytics Models
"""
from django.db import models


class VisitCounter(models.Model):
    """
    A named, monotonically increasing counter.

    Rows are only ever written through analytics.counters.VisitCounterStore.
    """

    key = models.CharField(
        max_length=100,
        primary_key=True,
        help_text="Unique counter name, e.g. site_visits"
    )

    count = models.PositiveBigIntegerField(
        default=0,
        help_text="Number of recorded events"
    )

    class Meta:
        db_table = 'analytics_visit_counters'
        verbose_name = 'Visit Counter'
        verbose_name_plural = 'Visit Counters'

    def __str__(self):
        return f"{self.key}: {self.count}"
