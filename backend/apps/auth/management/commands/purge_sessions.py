from django.core.management.base import BaseCommand

from apps.auth.container import build_auth_service


class Command(BaseCommand):
    help = "Delete session rows whose expiry has passed."

    def handle(self, *args, **options):
        removed = build_auth_service().purge_expired_sessions()
        self.stdout.write(self.style.SUCCESS(f"Purged {removed} expired session(s)."))
