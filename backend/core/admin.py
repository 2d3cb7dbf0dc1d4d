from django.contrib import admin
from .models import Project, Skill, Experience, Message

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title","category","github_url","live_url")
    list_filter = ("category",)
    search_fields = ("title","description")

@admin.register(Skill)
class SkillAdmin(admin.ModelAdmin):
    list_display = ("name","category","icon")
    list_filter = ("category",)

@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ("role","organization","period","type")
    list_filter = ("type",)

@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("name","email","subject","created_at")
    search_fields = ("name","email","subject")
    readonly_fields = ("name","email","subject","message","created_at")

    # contact messages are an append-only record
    def has_add_permission(self, request):
        return False
