# domains/courses/admin.py

from django.contrib import admin
from .models import Course


# --------------------------------------------------
# Course (퀴즈 정의 검증은 Course.clean)
# --------------------------------------------------

@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "is_active",
        "updated_at",
    )
    list_display_links = ("id", "name")
    list_filter = ("is_active",)
    search_fields = ("name",)
    ordering = ("-id",)
