import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projetos', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='FotoInstagram',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(max_length=200)),
                ('descricao', models.TextField(blank=True)),
                ('nome_arquivo', models.CharField(max_length=255)),
                ('url_arquivo', models.CharField(max_length=500)),
                ('tamanho_arquivo', models.PositiveIntegerField(default=0)),
                ('pasta', models.CharField(max_length=100)),
                ('status', models.CharField(choices=[('draft', 'Rascunho'), ('scheduled', 'Agendada'), ('posted', 'Publicada')], default='draft', max_length=20)),
                ('agendada_para', models.DateTimeField(blank=True, null=True)),
                ('publicada_em', models.DateTimeField(blank=True, null=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('projeto', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='fotos_instagram', to='projetos.projeto')),
                ('usuario', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='fotos_instagram', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'foto_instagram',
                'ordering': ['-criado_em', '-id'],
                'indexes': [models.Index(fields=['usuario', 'pasta'], name='foto_usuario_pasta_idx')],
            },
        ),
        migrations.CreateModel(
            name='Branding',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('missao', models.TextField(blank=True)),
                ('visao', models.TextField(blank=True)),
                ('valores', models.TextField(blank=True)),
                ('tom_voz', models.TextField(blank=True)),
                ('caracteristicas', models.TextField(blank=True)),
                ('publico_alvo', models.TextField(blank=True)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('criado_por', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='brandings_criados', to=settings.AUTH_USER_MODEL)),
                ('usuario', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='branding', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'branding',
                'ordering': ['-criado_em', '-id'],
            },
        ),
    ]
