import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('text', models.TextField(help_text='What the task is about')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('completed', 'Completed'), ('waiting', 'Waiting (Blocked)')], db_index=True, default='pending', max_length=15)),
                ('blocker_reason', models.TextField(blank=True, default='', help_text='Only meaningful when status is waiting')),
                ('manager_reply', models.TextField(blank=True, default='')),
                ('manager_reply_at', models.DateTimeField(blank=True, help_text='Set automatically when a reply is written', null=True)),
                ('is_assigned', models.BooleanField(default=False)),
                ('deadline', models.CharField(blank=True, default='', help_text='Free-form due time, shown as entered', max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True)),
                ('assigned_by', models.ForeignKey(blank=True, help_text='Manager who created this task for the owner', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_tasks', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(help_text='Employee this task belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'task',
                'verbose_name_plural': 'tasks',
                'ordering': ['-updated_at'],
                'indexes': [
                    models.Index(fields=['user', '-updated_at'], name='tasks_task_user_id_7f5b1e_idx'),
                    models.Index(fields=['status', 'updated_at'], name='tasks_task_status_3c9a2d_idx'),
                ],
            },
        ),
    ]
