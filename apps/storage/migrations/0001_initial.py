# Generated manually for the entity store tables

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Counter',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('model', models.CharField(max_length=64, unique=True)),
                ('count', models.PositiveBigIntegerField(default=0)),
            ],
            options={
                'db_table': 'counters',
            },
        ),
        migrations.CreateModel(
            name='UserAccount',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=150, unique=True)),
                ('password', models.CharField(max_length=255)),
                ('phone', models.CharField(max_length=32)),
                ('name', models.CharField(max_length=200)),
                ('email', models.EmailField(blank=True, max_length=255, null=True)),
                ('role', models.CharField(choices=[('manager', 'Manager'), ('customer', 'Customer')], max_length=20)),
                ('is_first_login', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField()),
                ('manager', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='customers', to='storage.useraccount')),
            ],
            options={
                'db_table': 'users',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['role', 'manager'], name='users_role_manager_idx')],
            },
        ),
        migrations.CreateModel(
            name='ChitGroup',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('value', models.PositiveIntegerField()),
                ('duration', models.PositiveSmallIntegerField()),
                ('members_count', models.PositiveSmallIntegerField()),
                ('start_date', models.DateField()),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField()),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='created_chit_groups', to='storage.useraccount')),
            ],
            options={
                'db_table': 'chit_groups',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['created_by', 'created_at'], name='chit_groups_creator_idx')],
            },
        ),
        migrations.CreateModel(
            name='ChitGroupMember',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('join_date', models.DateField()),
                ('created_at', models.DateTimeField()),
                ('chit_group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='storage.chitgroup')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='memberships', to='storage.useraccount')),
            ],
            options={
                'db_table': 'chit_group_members',
                'ordering': ['id'],
                'constraints': [models.UniqueConstraint(fields=('chit_group', 'user'), name='unique_chit_group_member')],
            },
        ),
        migrations.CreateModel(
            name='Auction',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('auction_date', models.DateField()),
                ('month_number', models.PositiveSmallIntegerField()),
                ('status', models.CharField(choices=[('scheduled', 'Scheduled'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='scheduled', max_length=20)),
                ('winning_bid', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ('created_at', models.DateTimeField()),
                ('chit_group', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='auctions', to='storage.chitgroup')),
                ('winner_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='won_auctions', to='storage.useraccount')),
            ],
            options={
                'db_table': 'auctions',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['chit_group', 'month_number'], name='auctions_group_month_idx')],
            },
        ),
        migrations.CreateModel(
            name='Bid',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('bid_amount', models.DecimalField(decimal_places=2, max_digits=14)),
                ('bid_time', models.DateTimeField()),
                ('created_at', models.DateTimeField()),
                ('auction', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='bids', to='storage.auction')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='bids', to='storage.useraccount')),
            ],
            options={
                'db_table': 'bids',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=14)),
                ('payment_date', models.DateField()),
                ('month_number', models.PositiveSmallIntegerField()),
                ('status', models.CharField(choices=[('paid', 'Paid'), ('pending', 'Pending'), ('overdue', 'Overdue')], max_length=20)),
                ('created_at', models.DateTimeField()),
                ('chit_group', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='storage.chitgroup')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='storage.useraccount')),
            ],
            options={
                'db_table': 'payments',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['chit_group', 'month_number'], name='payments_group_month_idx'),
                    models.Index(fields=['user', 'payment_date'], name='payments_user_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Notification',
            fields=[
                ('id', models.PositiveIntegerField(primary_key=True, serialize=False)),
                ('message', models.TextField()),
                ('is_read', models.BooleanField(default=False)),
                ('type', models.CharField(choices=[('payment', 'Payment'), ('auction', 'Auction'), ('general', 'General')], max_length=20)),
                ('created_at', models.DateTimeField()),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='notifications', to='storage.useraccount')),
            ],
            options={
                'db_table': 'notifications',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['user', 'is_read'], name='notifications_user_read_idx')],
            },
        ),
    ]
