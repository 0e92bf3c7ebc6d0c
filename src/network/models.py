"""Models for the social graph: users and the directed follow edges between them."""
from django.db import models


class User(models.Model):
    """A member of the social graph identified by an auto-incremented id."""

    name = models.CharField(max_length=255)
    following = models.ManyToManyField(
        "self",
        symmetrical=False,
        through="Follow",
        through_fields=("follower", "following"),
        related_name="followers",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name


class Follow(models.Model):
    """Directed edge: ``follower`` observes ``following``."""

    follower = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="following_edges"
    )
    following = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="follower_edges"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["follower_id", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["follower", "following"],
                name="network_follow_unique_pair",
            ),
            models.CheckConstraint(
                condition=~models.Q(follower=models.F("following")),
                name="network_follow_no_self_loop",
            ),
        ]

    def __str__(self):
        return f"{self.follower} follows {self.following}"
