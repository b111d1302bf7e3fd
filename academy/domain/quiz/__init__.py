"""
Quiz 도메인: 응시 상태 전이, 제한 시간, 채점 규칙 (Django 미사용)
"""
