# apps/domains/quizzes/serializers/admin_submission.py

from rest_framework import serializers

from apps.domains.quizzes.models import QuizSubmission


class AdminQuizSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuizSubmission
        fields = "__all__"
