# Generated manually for the vendors app

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('vendors', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='rollpackage',
            constraint=models.UniqueConstraint(
                condition=models.Q(('transaction_reference', ''), _negated=True),
                fields=('transaction_reference',),
                name='unique_store_receipt',
            ),
        ),
    ]
