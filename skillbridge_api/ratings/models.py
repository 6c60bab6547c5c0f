from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator

from applications.models import Application


class Rating(models.Model):
    """One rating per application, given by one party to the other."""
    application = models.OneToOneField(Application, on_delete=models.CASCADE, related_name='rating')
    from_user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='ratings_given')
    to_user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='ratings_received')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.from_user} rated {self.to_user}: {self.rating}"
