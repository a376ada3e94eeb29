import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='StatusSnapshot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('completed', models.JSONField(blank=True, default=list)),
                ('pending', models.JSONField(blank=True, default=list)),
                ('blockers', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='status_snapshots', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'status snapshot',
                'verbose_name_plural': 'status snapshots',
                'ordering': ['-date'],
                'indexes': [
                    models.Index(fields=['user', '-date'], name='status_snap_user_date_idx'),
                ],
            },
        ),
    ]
