# apps/domains/quizzes/serializers/attempt.py
"""
Use Case DTO → JSON

DTO(dataclass) 속성을 그대로 읽는 출력 전용 serializer.
"""
from rest_framework import serializers


class SubmitAttemptSerializer(serializers.Serializer):
    # 구조 검증은 도메인(validate_answers_payload)에서 한 번만
    answers = serializers.JSONField(required=False)


class StartedAttemptSerializer(serializers.Serializer):
    submission_id = serializers.IntegerField()
    attempt_number = serializers.IntegerField()
    started_at = serializers.DateTimeField()
    time_limit = serializers.FloatField(allow_null=True)


class ActiveAttemptSerializer(serializers.Serializer):
    submission_id = serializers.IntegerField()
    attempt_number = serializers.IntegerField()
    time_remaining = serializers.IntegerField(allow_null=True, help_text="초, null=무제한")


class AttemptSummarySerializer(serializers.Serializer):
    submission_id = serializers.IntegerField()
    attempt_number = serializers.IntegerField()
    status = serializers.CharField()
    score = serializers.IntegerField()
    total_points = serializers.FloatField()
    max_points = serializers.FloatField()
    passed = serializers.BooleanField()
    submitted_at = serializers.DateTimeField(allow_null=True)
    time_spent = serializers.IntegerField()


class QuestionViewSerializer(serializers.Serializer):
    id = serializers.CharField()
    question = serializers.CharField()
    type = serializers.CharField()
    options = serializers.ListField(child=serializers.CharField())
    points = serializers.FloatField()


class QuizMetadataSerializer(serializers.Serializer):
    time_limit = serializers.FloatField(allow_null=True)
    passing_score = serializers.IntegerField()
    total_questions = serializers.IntegerField()
    total_points = serializers.FloatField()


class QuizViewSerializer(serializers.Serializer):
    course_id = serializers.IntegerField()
    course_name = serializers.CharField()
    lesson_id = serializers.CharField()
    lesson_title = serializers.CharField()
    questions = QuestionViewSerializer(many=True)
    metadata = QuizMetadataSerializer()
    previous_attempts = AttemptSummarySerializer(many=True)
    active_submission = ActiveAttemptSerializer(allow_null=True)
    best_score = serializers.IntegerField(allow_null=True)


class AnswerResultSerializer(serializers.Serializer):
    question_id = serializers.CharField()
    question = serializers.CharField(allow_null=True)
    type = serializers.CharField(allow_null=True)
    options = serializers.ListField(child=serializers.CharField())
    answer = serializers.JSONField(allow_null=True)
    correct_answer = serializers.JSONField(allow_null=True)
    is_correct = serializers.BooleanField()
    points_earned = serializers.FloatField()
    points_possible = serializers.FloatField()
    explanation = serializers.CharField(allow_null=True)


class AttemptResultSerializer(serializers.Serializer):
    submission_id = serializers.IntegerField()
    course_id = serializers.IntegerField()
    course_name = serializers.CharField(allow_blank=True)
    lesson_id = serializers.CharField()
    lesson_title = serializers.CharField(allow_blank=True)
    attempt_number = serializers.IntegerField()
    status = serializers.CharField()
    total_points = serializers.FloatField()
    max_points = serializers.FloatField()
    score = serializers.IntegerField()
    passing_score = serializers.IntegerField()
    passed = serializers.BooleanField()
    time_spent = serializers.IntegerField()
    started_at = serializers.DateTimeField(allow_null=True)
    submitted_at = serializers.DateTimeField(allow_null=True)
    results = AnswerResultSerializer(many=True)
