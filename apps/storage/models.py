# ==========================================
# apps/storage/models.py
# ==========================================

from django.db import models

from .records import AuctionStatus, NotificationType, PaymentStatus, UserRole


class Counter(models.Model):
    """Per-entity id sequence, incremented atomically on every insert."""

    model = models.CharField(max_length=64, unique=True)
    count = models.PositiveBigIntegerField(default=0)

    class Meta:
        db_table = 'counters'

    def __str__(self):
        return f"{self.model}: {self.count}"


class UserAccount(models.Model):
    """Manager or customer of the chit fund."""

    id = models.PositiveIntegerField(primary_key=True)
    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=255)
    phone = models.CharField(max_length=32)
    name = models.CharField(max_length=200)
    email = models.EmailField(max_length=255, blank=True, null=True)
    role = models.CharField(max_length=20, choices=UserRole.choices)
    is_first_login = models.BooleanField(default=True)
    manager = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='customers'
    )
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['role', 'manager'], name='users_role_manager_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return f"{self.username} ({self.role})"


class ChitGroup(models.Model):
    """Rotating savings pool owned by the manager who created it."""

    id = models.PositiveIntegerField(primary_key=True)
    name = models.CharField(max_length=200)
    value = models.PositiveIntegerField()
    duration = models.PositiveSmallIntegerField()
    members_count = models.PositiveSmallIntegerField()
    start_date = models.DateField()
    is_active = models.BooleanField(default=True)
    created_by = models.ForeignKey(
        UserAccount,
        on_delete=models.PROTECT,
        related_name='created_chit_groups'
    )
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'chit_groups'
        indexes = [
            models.Index(fields=['created_by', 'created_at'], name='chit_groups_creator_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return self.name


class ChitGroupMember(models.Model):
    """Customer enrolled in a chit group."""

    id = models.PositiveIntegerField(primary_key=True)
    chit_group = models.ForeignKey(ChitGroup, on_delete=models.CASCADE, related_name='members')
    user = models.ForeignKey(UserAccount, on_delete=models.PROTECT, related_name='memberships')
    join_date = models.DateField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'chit_group_members'
        constraints = [
            models.UniqueConstraint(
                fields=['chit_group', 'user'],
                name='unique_chit_group_member'
            ),
        ]
        ordering = ['id']

    def __str__(self):
        return f"user {self.user_id} in group {self.chit_group_id}"


class Auction(models.Model):
    """Monthly auction of a chit group."""

    id = models.PositiveIntegerField(primary_key=True)
    chit_group = models.ForeignKey(ChitGroup, on_delete=models.PROTECT, related_name='auctions')
    auction_date = models.DateField()
    month_number = models.PositiveSmallIntegerField()
    status = models.CharField(
        max_length=20,
        choices=AuctionStatus.choices,
        default=AuctionStatus.SCHEDULED
    )
    winner_user = models.ForeignKey(
        UserAccount,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='won_auctions'
    )
    winning_bid = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'auctions'
        indexes = [
            models.Index(fields=['chit_group', 'month_number'], name='auctions_group_month_idx'),
        ]
        ordering = ['id']

    def __str__(self):
        return f"Auction {self.id} (group {self.chit_group_id}, month {self.month_number})"


class Bid(models.Model):
    """Append-only bid on an auction."""

    id = models.PositiveIntegerField(primary_key=True)
    auction = models.ForeignKey(Auction, on_delete=models.PROTECT, related_name='bids')
    user = models.ForeignKey(UserAccount, on_delete=models.PROTECT, related_name='bids')
    bid_amount = models.DecimalField(max_digits=14, decimal_places=2)
    bid_time = models.DateTimeField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'bids'
        ordering = ['id']


class Payment(models.Model):
    """Monthly contribution of a member."""

    id = models.PositiveIntegerField(primary_key=True)
    chit_group = models.ForeignKey(ChitGroup, on_delete=models.PROTECT, related_name='payments')
    user = models.ForeignKey(UserAccount, on_delete=models.PROTECT, related_name='payments')
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    payment_date = models.DateField()
    month_number = models.PositiveSmallIntegerField()
    status = models.CharField(max_length=20, choices=PaymentStatus.choices)
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['chit_group', 'month_number'], name='payments_group_month_idx'),
            models.Index(fields=['user', 'payment_date'], name='payments_user_date_idx'),
        ]
        ordering = ['id']


class Notification(models.Model):
    """Message addressed to a single user."""

    id = models.PositiveIntegerField(primary_key=True)
    user = models.ForeignKey(UserAccount, on_delete=models.PROTECT, related_name='notifications')
    message = models.TextField()
    is_read = models.BooleanField(default=False)
    type = models.CharField(max_length=20, choices=NotificationType.choices)
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notifications_user_read_idx'),
        ]
        ordering = ['id']
