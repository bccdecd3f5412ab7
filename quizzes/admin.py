from django.contrib import admin
from .models import Assessment, Question


class QuestionInline(admin.TabularInline):
    model = Question
    readonly_fields = ["word_id", "question_type", "user_answer", "is_correct"]
    extra = 0
    can_delete = False


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    list_display = ["user", "type", "total_questions", "correct_answers", "percent", "score", "started_at", "finished_at"]
    list_filter = ["type", "finished_at"]
    search_fields = ["user__username"]
    readonly_fields = ["started_at", "finished_at", "correct_answers", "percent", "score"]
    inlines = [QuestionInline]
