import django_filters

from .models import QuizSubmission


class QuizSubmissionFilter(django_filters.FilterSet):
    lesson_id = django_filters.CharFilter()
    status = django_filters.ChoiceFilter(choices=QuizSubmission.Status.choices)
    started_from = django_filters.IsoDateTimeFilter(field_name="started_at", lookup_expr="gte")
    started_to = django_filters.IsoDateTimeFilter(field_name="started_at", lookup_expr="lte")

    class Meta:
        model = QuizSubmission
        fields = ["course_id", "lesson_id", "user_id", "status", "started_from", "started_to"]
