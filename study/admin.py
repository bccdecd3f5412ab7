from django.contrib import admin
from .models import MemoryState


@admin.register(MemoryState)
class MemoryStateAdmin(admin.ModelAdmin):
    list_display = ["user", "word_id", "success_count", "fail_count", "last_seen_at", "next_review_at"]
    list_filter = ["next_review_at"]
    search_fields = ["user__username"]
    readonly_fields = ["created_at", "updated_at"]
