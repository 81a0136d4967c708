from django.db import models
from django.db.models import Q


class TrendingSection(models.TextChoices):
    ONLINE = 'online', 'Online'
    OFFLINE = 'offline', 'Offline'


class TrendingEntry(models.Model):
    """
    One curated slot on the home screen.

    The rows of a section are replaced wholesale on every publish, so
    positions stay contiguous from zero.
    """

    section = models.CharField(max_length=10, choices=TrendingSection.choices)
    position = models.PositiveIntegerField()

    offer = models.ForeignKey(
        'offers.Offer',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='trending_entries'
    )
    online_offer = models.ForeignKey(
        'offers.OnlineOffer',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='trending_entries'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'trending_offers'
        ordering = ['section', 'position']
        constraints = [
            models.UniqueConstraint(fields=['section', 'position'], name='trending_section_position_uniq'),
            models.UniqueConstraint(
                fields=['section', 'offer'],
                condition=Q(offer__isnull=False),
                name='trending_unique_offer',
            ),
            models.UniqueConstraint(
                fields=['section', 'online_offer'],
                condition=Q(online_offer__isnull=False),
                name='trending_unique_online_offer',
            ),
            models.CheckConstraint(
                condition=(
                    Q(section=TrendingSection.OFFLINE, offer__isnull=False, online_offer__isnull=True) |
                    Q(section=TrendingSection.ONLINE, online_offer__isnull=False, offer__isnull=True)
                ),
                name='trending_offer_matches_section',
            ),
        ]

    def __str__(self):
        return f"{self.section} #{self.position}"

    @property
    def target(self):
        return self.offer if self.section == TrendingSection.OFFLINE else self.online_offer


class CurationState(models.Model):
    """Single row; ``version`` moves on every publish."""

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    version = models.PositiveIntegerField(default=0)
    published_at = models.DateTimeField(null=True, blank=True)
    published_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    class Meta:
        db_table = 'trending_curation_state'

    def __str__(self):
        return f"Trending v{self.version}"

    @classmethod
    def load(cls):
        state, _ = cls.objects.get_or_create(pk=cls.SINGLETON_ID)
        return state
