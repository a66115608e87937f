# Generated manually for the rolls app

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
            name='Roll',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('video_url', models.URLField(max_length=500)),
                ('caption', models.TextField(blank=True)),
                ('category', models.CharField(db_index=True, default='all', max_length=100)),
                ('duration', models.PositiveIntegerField(default=30, help_text='Seconds')),
                ('likes_count', models.PositiveIntegerField(default=0)),
                ('comments_count', models.PositiveIntegerField(default=0)),
                ('saves_count', models.PositiveIntegerField(default=0)),
                ('shares_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_rolls', to=settings.AUTH_USER_MODEL)),
                ('likes', models.ManyToManyField(blank=True, related_name='liked_rolls', to=settings.AUTH_USER_MODEL)),
                ('shop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='rolls', to='shops.shop')),
            ],
            options={
                'db_table': 'rolls',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['category', '-created_at'], name='rolls_categor_7b1e3f_idx'),
                    models.Index(fields=['shop', '-created_at'], name='rolls_shop_id_c42a90_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('comment', models.TextField()),
                ('likes_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('likes', models.ManyToManyField(blank=True, related_name='liked_comments', to=settings.AUTH_USER_MODEL)),
                ('roll', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='rolls.roll')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='roll_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'roll_comments',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['roll', '-created_at'], name='roll_commen_roll_id_9e4d21_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='SavedRoll',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('roll', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='saves', to='rolls.roll')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='saved_rolls', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'saved_rolls',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='savedroll',
            constraint=models.UniqueConstraint(fields=('user', 'roll'), name='unique_saved_roll_per_user'),
        ),
    ]
