from django.core.management.base import BaseCommand, CommandError

from users_app.models import UserProfile, UserRole


class Command(BaseCommand):
    help = "Grant (or with --revoke, remove) the dashboard administrator role."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument(
            "--revoke",
            action="store_true",
            help="Demote the user back to the regular role.",
        )

    def handle(self, *args, **options):
        email = options["email"].strip().lower()
        try:
            user = UserProfile.objects.get(email__iexact=email)
        except UserProfile.DoesNotExist:
            raise CommandError(f"No user with email {email}")

        user.role = UserRole.USER if options["revoke"] else UserRole.ADMIN
        user.save(update_fields=["role"])

        self.stdout.write(self.style.SUCCESS(
            f"{user.email} now has role {user.role}"))
