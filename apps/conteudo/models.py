# apps/conteudo/models.py

from django.conf import settings
from django.db import models

from apps.core.utils import iso, resumo_usuario


class FotoInstagram(models.Model):
    """Foto planejada para o Instagram, organizada em pastas"""

    STATUS_CHOICES = [
        ('draft', 'Rascunho'),
        ('scheduled', 'Agendada'),
        ('posted', 'Publicada'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    nome_arquivo = models.CharField(max_length=255)
    url_arquivo = models.CharField(max_length=500)
    tamanho_arquivo = models.PositiveIntegerField(default=0)
    pasta = models.CharField(max_length=100)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft')
    agendada_para = models.DateTimeField(null=True, blank=True)
    publicada_em = models.DateTimeField(null=True, blank=True)

    projeto = models.ForeignKey(
        'projetos.Projeto',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fotos_instagram'
    )
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='fotos_instagram'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'foto_instagram'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['usuario', 'pasta'], name='foto_usuario_pasta_idx'),
        ]

    def __str__(self):
        return f"{self.titulo} [{self.pasta}]"

    def para_dict(self):
        return {
            'id': self.id,
            'title': self.titulo,
            'description': self.descricao,
            'fileName': self.nome_arquivo,
            'fileUrl': self.url_arquivo,
            'fileSize': self.tamanho_arquivo,
            'folder': self.pasta,
            'status': self.status,
            'scheduledDate': iso(self.agendada_para),
            'postedDate': iso(self.publicada_em),
            'projectId': self.projeto_id,
            'project': {'id': self.projeto.id, 'title': self.projeto.titulo} if self.projeto else None,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class Branding(models.Model):
    """
    Identidade de marca do artista

    Cada usuário tem no máximo um branding. Administradores podem
    criá-lo em nome de um DJ (criado_por diferente de usuario).
    """

    missao = models.TextField(blank=True)
    visao = models.TextField(blank=True)
    valores = models.TextField(blank=True)
    tom_voz = models.TextField(blank=True)
    caracteristicas = models.TextField(blank=True)
    publico_alvo = models.TextField(blank=True)

    usuario = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='branding'
    )
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='brandings_criados'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'branding'
        ordering = ['-criado_em', '-id']

    def __str__(self):
        return f"Branding de {self.usuario}"

    def para_dict(self):
        return {
            'id': self.id,
            'mission': self.missao,
            'vision': self.visao,
            'values': self.valores,
            'voiceTone': self.tom_voz,
            'characteristics': self.caracteristicas,
            'targetAudience': self.publico_alvo,
            'userId': self.usuario_id,
            'createdBy': self.criado_por_id,
            'user': resumo_usuario(self.usuario),
            'creator': resumo_usuario(self.criado_por),
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }
