# ==========================================
# apps/storage/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html

from .models import (
    Auction,
    Bid,
    ChitGroup,
    ChitGroupMember,
    Counter,
    Notification,
    Payment,
    UserAccount,
)
from .records import AuctionStatus, PaymentStatus


class ReadOnlyAdmin(admin.ModelAdmin):
    """
    Operator view of the store tables.

    Writes must go through the API so ids come from the counters and the
    access rules run; the admin only inspects.
    """

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


def status_badge(colors):
    def badge(self, obj):
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    badge.short_description = 'Status'
    return badge


@admin.register(Counter)
class CounterAdmin(ReadOnlyAdmin):
    list_display = ['model', 'count']


@admin.register(UserAccount)
class UserAccountAdmin(ReadOnlyAdmin):
    list_display = ['id', 'username', 'name', 'role', 'manager', 'is_first_login', 'created_at']
    list_filter = ['role', 'is_first_login']
    search_fields = ['username', 'name', 'phone', 'email']
    exclude = ['password']


@admin.register(ChitGroup)
class ChitGroupAdmin(ReadOnlyAdmin):
    list_display = ['id', 'name', 'value', 'duration', 'members_count', 'is_active', 'created_by']
    list_filter = ['is_active']
    search_fields = ['name']


@admin.register(ChitGroupMember)
class ChitGroupMemberAdmin(ReadOnlyAdmin):
    list_display = ['id', 'chit_group', 'user', 'join_date']


@admin.register(Auction)
class AuctionAdmin(ReadOnlyAdmin):
    list_display = ['id', 'chit_group', 'month_number', 'auction_date', 'auction_status', 'winner_user', 'winning_bid']
    list_filter = ['status']

    auction_status = status_badge({
        AuctionStatus.SCHEDULED: ('#E5C49A', '#2C1810'),
        AuctionStatus.COMPLETED: ('#6B8E5E', 'white'),
        AuctionStatus.CANCELLED: ('#B85C5C', 'white'),
    })


@admin.register(Bid)
class BidAdmin(ReadOnlyAdmin):
    list_display = ['id', 'auction', 'user', 'bid_amount', 'bid_time']


@admin.register(Payment)
class PaymentAdmin(ReadOnlyAdmin):
    list_display = ['id', 'chit_group', 'user', 'amount', 'month_number', 'payment_date', 'payment_status']
    list_filter = ['status']

    payment_status = status_badge({
        PaymentStatus.PAID: ('#6B8E5E', 'white'),
        PaymentStatus.PENDING: ('#E5C49A', '#2C1810'),
        PaymentStatus.OVERDUE: ('#B85C5C', 'white'),
    })


@admin.register(Notification)
class NotificationAdmin(ReadOnlyAdmin):
    list_display = ['id', 'user', 'type', 'is_read', 'created_at']
    list_filter = ['type', 'is_read']
