import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('agenda', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Notificacao',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tipo', models.CharField(choices=[('general', 'Geral'), ('event_share', 'Evento compartilhado'), ('transaction_assigned', 'Receita atribuída'), ('note_share', 'Nota compartilhada'), ('document_share', 'Documento compartilhado'), ('photo_share', 'Foto compartilhada'), ('branding_share', 'Branding compartilhado'), ('branding_created', 'Branding criado')], default='general', max_length=30)),
                ('titulo', models.CharField(max_length=200)),
                ('mensagem', models.TextField()),
                ('recurso', models.CharField(blank=True, max_length=30)),
                ('recurso_id', models.PositiveIntegerField(blank=True, null=True)),
                ('lida', models.BooleanField(default=False)),
                ('lida_em', models.DateTimeField(blank=True, null=True)),
                ('criado_em', models.DateTimeField(default=django.utils.timezone.now)),
                ('compartilhamento', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='notificacoes', to='agenda.compartilhamentoevento')),
                ('destinatario', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notificacoes', to=settings.AUTH_USER_MODEL)),
                ('evento', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='notificacoes', to='agenda.evento')),
            ],
            options={
                'db_table': 'notificacao',
                'ordering': ['-criado_em', '-id'],
                'indexes': [
                    models.Index(fields=['destinatario', 'lida'], name='notificacao_dest_lida_idx'),
                    models.Index(fields=['tipo'], name='notificacao_tipo_idx'),
                ],
            },
        ),
    ]
