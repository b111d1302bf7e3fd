"""
테스트 데이터 빌더: Course.modules JSON
"""
from __future__ import annotations


def mc(qid, correct="B", options=("A", "B", "C"), points=None, explanation=None):
    q = {
        "id": qid,
        "question": f"Question {qid}?",
        "type": "multiple-choice",
        "options": list(options),
        "correct_answer": correct,
    }
    if points is not None:
        q["points"] = points
    if explanation is not None:
        q["explanation"] = explanation
    return q


def tf(qid, correct=True, points=None):
    q = {"id": qid, "question": f"Is {qid} true?", "type": "true-false", "correct_answer": correct}
    if points is not None:
        q["points"] = points
    return q


def text(qid, correct="Paris", points=None):
    q = {"id": qid, "question": f"Name for {qid}?", "type": "text", "correct_answer": correct}
    if points is not None:
        q["points"] = points
    return q


def quiz_lesson(lesson_id, questions, time_limit=None, passing_score=None, title="Quiz"):
    content = {"questions": questions}
    if time_limit is not None:
        content["time_limit"] = time_limit
    if passing_score is not None:
        content["passing_score"] = passing_score
    return {"id": lesson_id, "title": title, "type": "Quiz", "content": content}


def video_lesson(lesson_id):
    return {"id": lesson_id, "title": "Intro video", "type": "Video", "content": {"url": "https://example.com/v"}}


def modules(*lessons, module_id="m1"):
    return [{"id": module_id, "title": "Module 1", "lessons": list(lessons)}]


def three_question_modules(time_limit=None, passing_score=None):
    """10점 x 3 문항 (q1 mc, q2 tf, q3 text)."""
    return modules(
        quiz_lesson(
            "quiz-1",
            [mc("q1", explanation="B is right"), tf("q2"), text("q3")],
            time_limit=time_limit,
            passing_score=passing_score,
        ),
        video_lesson("video-1"),
    )
