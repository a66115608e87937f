# Generated manually for the vendors app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('shops', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='VendorProfile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('available_rolls', models.PositiveIntegerField(default=0)),
                ('total_rolls_used', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('shop', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vendor_profiles', to='shops.shop')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='vendor_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'vendor_profiles',
            },
        ),
        migrations.CreateModel(
            name='RollPackage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('package_type', models.CharField(max_length=10)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('rolls_included', models.PositiveIntegerField()),
                ('bonus_rolls', models.PositiveIntegerField(default=0)),
                ('source', models.CharField(choices=[('catalog', 'Catalog purchase'), ('store', 'In-app store purchase'), ('admin', 'Admin grant')], default='catalog', max_length=10)),
                ('platform', models.CharField(blank=True, max_length=10)),
                ('transaction_reference', models.CharField(blank=True, db_index=True, max_length=500)),
                ('is_active', models.BooleanField(default=True)),
                ('purchase_date', models.DateTimeField(auto_now_add=True)),
                ('vendor_profile', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='packages', to='vendors.vendorprofile')),
            ],
            options={
                'db_table': 'roll_packages',
                'ordering': ['-purchase_date'],
                'indexes': [
                    models.Index(fields=['vendor_profile', '-purchase_date'], name='roll_packag_vendor__5e0b7c_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ShareEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('device_id', models.CharField(db_index=True, max_length=255)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('platform', models.CharField(choices=[('ios', 'iOS'), ('android', 'Android'), ('web', 'Web')], max_length=10)),
                ('verification_hash', models.CharField(max_length=64)),
                ('verified', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='share_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'share_events',
                'ordering': ['-created_at'],
            },
        ),
    ]
