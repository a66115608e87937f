# Generated manually for the leaderboard app

import uuid
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('shops', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='WeeklyShopShare',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('country', models.CharField(max_length=2)),
                ('week_start', models.DateTimeField()),
                ('share_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('shop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='weekly_shares', to='shops.shop')),
            ],
            options={
                'db_table': 'weekly_shop_shares',
                'ordering': ['-week_start', '-share_count'],
                'indexes': [
                    models.Index(fields=['country', '-week_start', '-share_count'], name='weekly_shop_country_8a7f2e_idx'),
                ],
            },
        ),
        migrations.AddConstraint(
            model_name='weeklyshopshare',
            constraint=models.UniqueConstraint(fields=('shop', 'country', 'week_start'), name='unique_weekly_share_per_shop_country'),
        ),
    ]
