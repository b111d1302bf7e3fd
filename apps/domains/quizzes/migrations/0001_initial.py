# apps/domains/quizzes/migrations/0001_initial.py
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="QuizSubmission",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course_id", models.PositiveIntegerField()),
                ("lesson_id", models.CharField(max_length=64)),
                ("user_id", models.PositiveIntegerField()),
                ("attempt_number", models.PositiveIntegerField(help_text="1부터 시작")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("in_progress", "In progress"),
                            ("graded", "Graded"),
                            ("expired", "Expired"),
                        ],
                        default="in_progress",
                        max_length=20,
                    ),
                ),
                ("started_at", models.DateTimeField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(blank=True, null=True)),
                ("time_spent", models.PositiveIntegerField(default=0, help_text="초")),
                (
                    "time_limit",
                    models.FloatField(blank=True, help_text="분, null=무제한", null=True),
                ),
                ("passing_score", models.PositiveSmallIntegerField(default=70)),
                ("answers", models.JSONField(blank=True, default=list)),
                ("total_points", models.FloatField(default=0.0)),
                ("max_points", models.FloatField(default=0.0)),
                ("score", models.PositiveSmallIntegerField(default=0, help_text="0~100 (%)")),
                ("passed", models.BooleanField(default=False)),
                ("ip_address", models.GenericIPAddressField(blank=True, null=True)),
                ("user_agent", models.CharField(blank=True, max_length=512)),
            ],
            options={
                "db_table": "quizzes_quiz_submission",
                "ordering": ["-attempt_number"],
            },
        ),
        migrations.AddConstraint(
            model_name="quizsubmission",
            constraint=models.UniqueConstraint(
                fields=("user_id", "lesson_id", "attempt_number"),
                name="uniq_quiz_attempt_number",
            ),
        ),
        migrations.AddIndex(
            model_name="quizsubmission",
            index=models.Index(
                fields=["course_id", "lesson_id"],
                name="quizzes_qui_course__3f1a2b_idx",
            ),
        ),
        migrations.AddIndex(
            model_name="quizsubmission",
            index=models.Index(
                fields=["user_id", "lesson_id", "status"],
                name="quizzes_qui_user_id_8c4d1e_idx",
            ),
        ),
        migrations.AddIndex(
            model_name="quizsubmission",
            index=models.Index(
                fields=["status"],
                name="quizzes_qui_status_5b7e9a_idx",
            ),
        ),
    ]
