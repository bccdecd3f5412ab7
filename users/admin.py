from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.html import format_html
from .models import User, UserSettings


class UserSettingsInline(admin.StackedInline):
    model = UserSettings
    can_delete = False
    extra = 0


@admin.register(User)
class VocabUserAdmin(UserAdmin):
    list_display = ['username', 'full_name', 'telegram_id_col', 'last_seen_at', 'date_joined']
    search_fields = ['username', 'full_name', 'telegram_id']
    ordering = ['-date_joined']
    list_per_page = 30
    inlines = [UserSettingsInline]
    fieldsets = UserAdmin.fieldsets + (
        ('Telegram', {'fields': ('telegram_id', 'full_name', 'last_seen_at')}),
    )

    def telegram_id_col(self, obj):
        if obj.telegram_id is None:
            return '—'
        return format_html('<code style="font-size:12px">{}</code>', obj.telegram_id)
    telegram_id_col.short_description = 'Telegram ID'
    telegram_id_col.admin_order_field = 'telegram_id'


@admin.register(UserSettings)
class UserSettingsAdmin(admin.ModelAdmin):
    list_display = ['user', 'preferred_category', 'direction', 'daily_words']
    list_filter = ['direction', 'preferred_category']
    search_fields = ['user__username']
