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
            name='Nota',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(blank=True, max_length=200)),
                ('conteudo', models.TextField()),
                ('tipo', models.CharField(choices=[('general', 'Geral'), ('diary', 'Diário'), ('gratitude', 'Gratidão'), ('idea', 'Ideia'), ('reminder', 'Lembrete')], default='general', max_length=20)),
                ('fixada', models.BooleanField(default=False)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('usuario', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notas', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'nota',
                'ordering': ['-fixada', '-criado_em', '-id'],
            },
        ),
        migrations.CreateModel(
            name='RegistroAutocuidado',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo', models.CharField(choices=[('mood', 'Humor'), ('sleep', 'Sono'), ('activity', 'Atividade'), ('gratitude', 'Gratidão')], max_length=20)),
                ('valor', models.CharField(max_length=200)),
                ('data', models.DateField(default=django.utils.timezone.localdate)),
                ('observacoes', models.TextField(blank=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('usuario', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='registros_autocuidado', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'registro_autocuidado',
                'ordering': ['-data', '-criado_em', '-id'],
                'indexes': [models.Index(fields=['usuario', 'data'], name='autocuidado_usuario_data_idx')],
            },
        ),
    ]
