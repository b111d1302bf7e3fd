# PATH: apps/domains/quizzes/management/commands/expire_quiz_attempts.py
"""
제한 시간이 지난 in_progress 퀴즈 응시를 expired 로 확정.

- Celery beat 없이 cron 으로 돌릴 때 사용 (1분 주기 권장)
- 제출/조회 경로와 같은 조건부 확정을 쓰므로 동시에 돌아도 안전

사용:
  python manage.py expire_quiz_attempts
  python manage.py expire_quiz_attempts --dry-run
"""
from django.core.management.base import BaseCommand
from django.utils import timezone

from academy.adapters.db.django.repositories_quiz import DjangoAttemptStore
from academy.domain.quiz import time_guard
from apps.domains.quizzes.services import build_expiration_sweeper


class Command(BaseCommand):
    help = "제한 시간이 지난 진행 중 퀴즈 응시를 expired 로 확정합니다."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="실제 확정 없이 대상만 출력",
        )

    def handle(self, *args, **options):
        if options["dry_run"]:
            now = timezone.now()
            overdue = [
                r for r in DjangoAttemptStore().list_sweep_candidates()
                if time_guard.is_expired(r, now)
            ]
            self.stdout.write(f"만료 대상: {len(overdue)}건")
            for r in overdue[:5]:
                self.stdout.write(
                    f"  - submission={r.id} user={r.user_id} lesson={r.lesson_id} "
                    f"started_at={r.started_at}"
                )
            if len(overdue) > 5:
                self.stdout.write(f"  ... 외 {len(overdue) - 5}건")
            self.stdout.write(self.style.WARNING("--dry-run: 실제 확정하지 않음"))
            return

        report = build_expiration_sweeper().run()

        if report.skipped:
            self.stdout.write(self.style.WARNING(f"다른 스윕 실행 중, 건너뜀 (run_id={report.run_id})"))
            return

        msg = (
            f"스윕 완료 run_id={report.run_id} scanned={report.scanned} "
            f"expired={report.expired} lost={report.lost} failed={report.failed}"
        )
        if report.failed:
            self.stdout.write(self.style.ERROR(msg))
        else:
            self.stdout.write(self.style.SUCCESS(msg))
