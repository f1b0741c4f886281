from django.contrib import admin

from meetups.models import Event, EventParticipant, Type


class EventParticipantInline(admin.TabularInline):
    model = EventParticipant
    extra = 0


@admin.register(Type)
class TypeAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name"]

    def get_readonly_fields(self, request, obj=None):
        # Types are lookup data: created once, never renamed.
        if obj is not None:
            return ["name"]
        return []

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "start", "end", "organiser_id", "created_on"]
    list_filter = ["type"]
    search_fields = ["name", "organiser_id"]
    inlines = [EventParticipantInline]

    def get_readonly_fields(self, request, obj=None):
        # The organiser is fixed once the event exists.
        if obj is not None:
            return ["organiser_id", "created_on"]
        return ["created_on"]

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(EventParticipant)
class EventParticipantAdmin(admin.ModelAdmin):
    list_display = ["helper_id", "event"]
    list_filter = ["event__type"]
    search_fields = ["helper_id"]
