# apps/pessoal/models.py

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.core.utils import iso


class Nota(models.Model):
    """Nota pessoal (diário, gratidão, ideias, lembretes)"""

    TIPO_CHOICES = [
        ('general', 'Geral'),
        ('diary', 'Diário'),
        ('gratitude', 'Gratidão'),
        ('idea', 'Ideia'),
        ('reminder', 'Lembrete'),
    ]

    titulo = models.CharField(max_length=200, blank=True)
    conteudo = models.TextField()
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default='general')
    fixada = models.BooleanField(default=False)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notas'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'nota'
        ordering = ['-fixada', '-criado_em', '-id']

    def __str__(self):
        return self.titulo or self.conteudo[:40]

    def para_dict(self):
        return {
            'id': self.id,
            'title': self.titulo or None,
            'content': self.conteudo,
            'type': self.tipo,
            'pinned': self.fixada,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class RegistroAutocuidado(models.Model):
    """
    Registro diário de autocuidado

    O valor é livre ("8", "7.5h", "😊"...) e exibido como foi informado.
    """

    TIPO_HUMOR = 'mood'
    TIPO_SONO = 'sleep'
    TIPO_ATIVIDADE = 'activity'
    TIPO_GRATIDAO = 'gratitude'

    TIPO_CHOICES = [
        (TIPO_HUMOR, 'Humor'),
        (TIPO_SONO, 'Sono'),
        (TIPO_ATIVIDADE, 'Atividade'),
        (TIPO_GRATIDAO, 'Gratidão'),
    ]

    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES)
    valor = models.CharField(max_length=200)
    data = models.DateField(default=timezone.localdate)
    observacoes = models.TextField(blank=True)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='registros_autocuidado'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'registro_autocuidado'
        ordering = ['-data', '-criado_em', '-id']
        indexes = [
            models.Index(fields=['usuario', 'data'], name='autocuidado_usuario_data_idx'),
        ]

    def __str__(self):
        return f"{self.get_tipo_display()} em {self.data}: {self.valor}"

    def para_dict(self):
        return {
            'id': self.id,
            'type': self.tipo,
            'value': self.valor,
            'date': iso(self.data),
            'notes': self.observacoes or None,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }
