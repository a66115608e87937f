# Generated manually for the leaderboard app

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('leaderboard', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='weeklyshopshare',
            name='country',
            field=models.CharField(max_length=100),
        ),
    ]
