# apps/agenda/models.py

from django.conf import settings
from django.db import models
from django.db.models import F, Q

from apps.core.utils import ErroRequisicao, iso, resumo_usuario, valor_monetario


class TransicaoInvalida(ErroRequisicao):
    """Mudança de status de compartilhamento não permitida"""

    status = 409


class EventoQuerySet(models.QuerySet):

    def visiveis_para(self, usuario):
        """
        Eventos próprios do usuário mais os compartilhados
        com ele cujo convite foi aceito
        """
        return self.filter(
            Q(usuario=usuario) |
            Q(
                compartilhado=True,
                compartilhamentos__usuario=usuario,
                compartilhamentos__status=CompartilhamentoEvento.STATUS_ACEITO,
            )
        ).distinct().order_by('data', F('hora').asc(nulls_last=True), 'id')


class Evento(models.Model):
    """Evento da agenda (show, reunião, gravação...)"""

    STATUS_CHOICES = [
        ('scheduled', 'Agendado'),
        ('confirmed', 'Confirmado'),
        ('completed', 'Realizado'),
        ('cancelled', 'Cancelado'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    data = models.DateField()
    hora = models.TimeField(null=True, blank=True)
    local = models.CharField(max_length=300, blank=True)
    valor_cache = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='scheduled')

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='eventos'
    )
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='eventos_criados'
    )
    compartilhado = models.BooleanField(default=False)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    objects = EventoQuerySet.as_manager()

    class Meta:
        db_table = 'evento'
        ordering = ['data', 'hora']
        indexes = [
            models.Index(fields=['usuario', 'data'], name='evento_usuario_data_idx'),
        ]

    def __str__(self):
        return f"{self.titulo} ({self.data})"

    def para_dict(self):
        return {
            'id': self.id,
            'title': self.titulo,
            'description': self.descricao,
            'date': iso(self.data),
            'time': self.hora.strftime('%H:%M') if self.hora else None,
            'location': self.local,
            'fee': valor_monetario(self.valor_cache),
            'status': self.status,
            'userId': self.usuario_id,
            'createdBy': self.criado_por_id,
            'isShared': self.compartilhado,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class CompartilhamentoEvento(models.Model):
    """
    Convite de um evento para outro usuário

    Ciclo de vida: pending -> accepted | declined.
    Um convite respondido não volta a ficar pendente.
    """

    STATUS_PENDENTE = 'pending'
    STATUS_ACEITO = 'accepted'
    STATUS_RECUSADO = 'declined'

    STATUS_CHOICES = [
        (STATUS_PENDENTE, 'Pendente'),
        (STATUS_ACEITO, 'Aceito'),
        (STATUS_RECUSADO, 'Recusado'),
    ]

    TRANSICOES_PERMITIDAS = {
        STATUS_PENDENTE: {STATUS_ACEITO, STATUS_RECUSADO},
        STATUS_ACEITO: set(),
        STATUS_RECUSADO: set(),
    }

    evento = models.ForeignKey(
        Evento,
        on_delete=models.CASCADE,
        related_name='compartilhamentos'
    )
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='convites_eventos'
    )
    compartilhado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='convites_enviados'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDENTE)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'compartilhamento_evento'
        ordering = ['-criado_em']
        constraints = [
            models.UniqueConstraint(
                fields=['evento', 'usuario'],
                name='compartilhamento_evento_unico'
            ),
        ]

    def __str__(self):
        return f"{self.evento.titulo} -> {self.usuario} ({self.status})"

    def alterar_status(self, novo_status):
        """
        Aplica uma transição de status

        Reenviar o status atual não altera nada e retorna False.
        Qualquer transição fora do ciclo de vida gera TransicaoInvalida.
        """
        if novo_status == self.status:
            return False

        if novo_status not in self.TRANSICOES_PERMITIDAS.get(self.status, set()):
            raise TransicaoInvalida(
                f"Não é possível alterar o compartilhamento de '{self.status}' para '{novo_status}'"
            )

        self.status = novo_status
        self.save(update_fields=['status', 'atualizado_em'])
        return True

    def para_dict(self, incluir_evento=True):
        dados = {
            'id': self.id,
            'eventId': self.evento_id,
            'userId': self.usuario_id,
            'sharedBy': self.compartilhado_por_id,
            'status': self.status,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
            'user': resumo_usuario(self.usuario),
        }
        if incluir_evento:
            dados['event'] = self.evento.para_dict()
        return dados
