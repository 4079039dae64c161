from django.contrib import admin

from catalog.models import Lesson, Order, OrderLineItem


class OrderLineItemInline(admin.TabularInline):
    model = OrderLineItem
    extra = 0
    can_delete = False
    readonly_fields = ["position", "lesson_id", "quantity", "unit_price"]


@admin.register(Lesson)
class LessonAdmin(admin.ModelAdmin):
    list_display = ["subject", "location", "price", "space", "updated_at"]
    search_fields = ["subject", "location"]
    list_filter = ["location"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["customer_name", "customer_phone", "total_amount", "status", "created_at"]
    search_fields = ["customer_name", "customer_phone"]
    inlines = [OrderLineItemInline]

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
