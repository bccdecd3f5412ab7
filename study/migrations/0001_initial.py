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
            name='MemoryState',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('word_id', models.PositiveIntegerField(db_index=True)),
                ('last_seen_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('next_review_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('success_count', models.PositiveIntegerField(default=0)),
                ('fail_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memory_states', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Memory State',
                'verbose_name_plural': 'Memory States',
                'constraints': [models.UniqueConstraint(fields=('user', 'word_id'), name='unique_memory_state_per_word')],
            },
        ),
    ]
