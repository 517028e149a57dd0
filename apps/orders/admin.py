from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'restaurant', 'order_type', 'status', 'total_amount', 'created_at']
    list_filter = ['status', 'order_type', 'payment_method', 'created_at']
    search_fields = ['id', 'qr_code', 'customer__username', 'customer__email', 'restaurant__name']
    readonly_fields = ['qr_code', 'order_items', 'completed_at', 'created_at', 'updated_at']
    raw_id_fields = ['customer', 'restaurant']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Order', {
            'fields': ('customer', 'restaurant', 'order_type', 'status')
        }),
        ('Payment', {
            'fields': ('payment_method', 'total_amount', 'qr_code')
        }),
        ('Items', {
            'fields': ('order_items',)
        }),
        ('Timestamps', {
            'fields': ('completed_at', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
