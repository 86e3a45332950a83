from django.conf import settings
from django.db import models

from common.models import BaseModel


class Team(BaseModel):
    """
    Represents a team that owns shared event types.
    Bookings of a team event type are presented under the team's name and slug.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)

    def __str__(self):
        return self.name


class TeamMembership(BaseModel):
    """
    Represents a membership of a user in a team.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="team_memberships",
    )
    team = models.ForeignKey(
        Team,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    accepted = models.BooleanField(default=False)

    class Meta(BaseModel.Meta):
        constraints = [
            models.UniqueConstraint(fields=("user", "team"), name="unique_team_membership"),
        ]

    def __str__(self):
        return f"{self.user} in {self.team}"
