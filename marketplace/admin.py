from django.contrib import admin

from .models import (
    InventoryMovement,
    Order,
    OrderItem,
    Product,
    ProductVariant,
)
from .services import InventoryService


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 1
    fields = ('name', 'sku', 'price', 'stock', 'has_unlimited_stock')


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name', 'description')
    inlines = [ProductVariantInline]

    def save_formset(self, request, form, formset, change):
        # Los pk por defecto (uuid4) existen antes de guardar; el filtro deja solo las filas ya persistidas.
        pks = [inline_form.instance.pk for inline_form in formset.forms]
        previous = dict(ProductVariant.objects.filter(pk__in=pks).values_list("pk", "stock"))
        super().save_formset(request, form, formset, change)
        for variant, changed_fields in formset.changed_objects:
            if "stock" in changed_fields and variant.pk in previous:
                InventoryService.check_low_stock(variant, previous[variant.pk], variant.stock)


@admin.register(ProductVariant)
class ProductVariantAdmin(admin.ModelAdmin):
    list_display = ('product', 'name', 'sku', 'price', 'stock', 'has_unlimited_stock')
    search_fields = ('name', 'sku', 'product__name')
    list_filter = ('has_unlimited_stock',)
    raw_id_fields = ('product',)

    def save_model(self, request, obj, form, change):
        previous_stock = None
        if change:
            previous_stock = (
                ProductVariant.objects.filter(pk=obj.pk).values_list('stock', flat=True).first()
            )
        super().save_model(request, obj, form, change)
        # Las variantes nuevas no tienen stock anterior contra el cual comparar.
        if previous_stock is not None:
            InventoryService.check_low_stock(obj, previous_stock, obj.stock)


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    raw_id_fields = ('variant',)
    readonly_fields = ('price_at_purchase',)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'status', 'total_amount', 'paid_at', 'created_at')
    list_filter = ('status',)
    raw_id_fields = ('user',)
    readonly_fields = ('status', 'paid_at')
    inlines = [OrderItemInline]


@admin.register(InventoryMovement)
class InventoryMovementAdmin(admin.ModelAdmin):
    list_display = ('variant', 'movement_type', 'quantity', 'reference_order', 'created_by', 'created_at')
    list_filter = ('movement_type',)
    search_fields = ('variant__sku', 'variant__product__name', 'description')
    raw_id_fields = ('variant', 'reference_order', 'created_by')

    def has_change_permission(self, request, obj=None):
        return False
