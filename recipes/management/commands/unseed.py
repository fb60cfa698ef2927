from django.core.management.base import BaseCommand
from django.db import transaction
from recipes.models import Recipe, User

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users together with their recipes, follow edges
    and favorite references, leaving administrative accounts in place.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        non_staff_users = User.objects.filter(is_staff=False)

        with transaction.atomic():
            recipe_count = Recipe.objects.filter(author__in=non_staff_users).count()
            deleted_count, _ = non_staff_users.delete()

        self.stdout.write(self.style.SUCCESS(
            f"Deleted {deleted_count} users and related rows ({recipe_count} recipes)."
        ))
