# apps/notificacoes/models.py

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.core.utils import iso


class Notificacao(models.Model):
    """
    Notificação endereçada a um usuário

    Criada quando algo é compartilhado ou atribuído a ele.
    Convites de evento apontam para o compartilhamento correspondente,
    que o destinatário pode aceitar ou recusar.
    """

    class Tipo(models.TextChoices):
        GERAL = 'general', 'Geral'
        EVENTO_COMPARTILHADO = 'event_share', 'Evento compartilhado'
        TRANSACAO_ATRIBUIDA = 'transaction_assigned', 'Receita atribuída'
        NOTA_COMPARTILHADA = 'note_share', 'Nota compartilhada'
        DOCUMENTO_COMPARTILHADO = 'document_share', 'Documento compartilhado'
        FOTO_COMPARTILHADA = 'photo_share', 'Foto compartilhada'
        BRANDING_COMPARTILHADO = 'branding_share', 'Branding compartilhado'
        BRANDING_CRIADO = 'branding_created', 'Branding criado'

    destinatario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notificacoes'
    )

    tipo = models.CharField(max_length=30, choices=Tipo.choices, default=Tipo.GERAL)
    titulo = models.CharField(max_length=200)
    mensagem = models.TextField()

    # === CONTEXTO OPCIONAL ===
    evento = models.ForeignKey(
        'agenda.Evento',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notificacoes'
    )
    compartilhamento = models.ForeignKey(
        'agenda.CompartilhamentoEvento',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='notificacoes'
    )
    recurso = models.CharField(max_length=30, blank=True)
    recurso_id = models.PositiveIntegerField(null=True, blank=True)

    # === ESTADO ===
    lida = models.BooleanField(default=False)
    lida_em = models.DateTimeField(null=True, blank=True)

    criado_em = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'notificacao'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['destinatario', 'lida'], name='notificacao_dest_lida_idx'),
            models.Index(fields=['tipo'], name='notificacao_tipo_idx'),
        ]

    def __str__(self):
        return f"{self.destinatario} | {self.tipo} | {self.titulo}"

    def marcar_como_lida(self):
        """Marca como lida; chamadas repetidas não alteram lida_em"""
        if not self.lida:
            self.lida = True
            self.lida_em = timezone.now()
            self.save(update_fields=['lida', 'lida_em'])

    @classmethod
    def marcar_todas_como_lidas(cls, usuario, tipo=None):
        """Marca como lidas todas as notificações pendentes do usuário"""
        qs = cls.objects.filter(destinatario=usuario, lida=False)
        if tipo:
            qs = qs.filter(tipo=tipo)

        return qs.update(lida=True, lida_em=timezone.now())

    def para_dict(self):
        return {
            'id': self.id,
            'userId': self.destinatario_id,
            'title': self.titulo,
            'message': self.mensagem,
            'type': self.tipo,
            'isRead': self.lida,
            'readAt': iso(self.lida_em),
            'eventId': self.evento_id,
            'shareId': self.compartilhamento_id,
            'shareStatus': self.compartilhamento.status if self.compartilhamento_id else None,
            'resourceType': self.recurso or None,
            'resourceId': self.recurso_id,
            'createdAt': iso(self.criado_em),
        }
