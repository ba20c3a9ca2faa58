# apps/projetos/models.py

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.utils import iso


class Projeto(models.Model):
    """Projeto do artista (branding, música, conteúdo...)"""

    CATEGORIA_CHOICES = [
        ('branding', 'Branding'),
        ('dj-music', 'DJ / Música'),
        ('instagram', 'Instagram'),
        ('other', 'Outro'),
    ]

    STATUS_CHOICES = [
        ('active', 'Ativo'),
        ('completed', 'Concluído'),
        ('paused', 'Pausado'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    categoria = models.CharField(max_length=20, choices=CATEGORIA_CHOICES, default='other')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    progresso = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    prazo = models.DateField(null=True, blank=True)

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='projetos'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projeto'
        ordering = ['-criado_em', '-id']

    def __str__(self):
        return self.titulo

    def para_dict(self, incluir_relacionados=False):
        dados = {
            'id': self.id,
            'title': self.titulo,
            'description': self.descricao,
            'category': self.categoria,
            'status': self.status,
            'progress': self.progresso,
            'deadline': iso(self.prazo),
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }

        if incluir_relacionados:
            dados['tasks'] = [tarefa.para_dict() for tarefa in self.tarefas.all()]
            dados['documents'] = [documento.para_dict() for documento in self.documentos.all()]

        return dados


class Tarefa(models.Model):
    """Tarefa de um projeto"""

    PRIORIDADE_CHOICES = [
        ('low', 'Baixa'),
        ('medium', 'Média'),
        ('high', 'Alta'),
    ]

    projeto = models.ForeignKey(
        Projeto,
        on_delete=models.CASCADE,
        related_name='tarefas'
    )
    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    concluida = models.BooleanField(default=False)
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='medium')
    data_limite = models.DateField(null=True, blank=True)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tarefa'
        ordering = ['concluida', 'data_limite', 'id']

    def __str__(self):
        return f"{self.titulo} ({self.projeto.titulo})"

    def para_dict(self):
        return {
            'id': self.id,
            'projectId': self.projeto_id,
            'title': self.titulo,
            'description': self.descricao,
            'completed': self.concluida,
            'priority': self.prioridade,
            'dueDate': iso(self.data_limite),
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }


class Documento(models.Model):
    """Documento (contrato, proposta, nota fiscal...) com arquivo hospedado externamente"""

    TIPO_ARQUIVO_CHOICES = [
        ('pdf', 'PDF'),
        ('doc', 'DOC'),
        ('docx', 'DOCX'),
        ('image', 'Imagem'),
    ]

    CATEGORIA_CHOICES = [
        ('contract', 'Contrato'),
        ('proposal', 'Proposta'),
        ('invoice', 'Nota fiscal'),
        ('other', 'Outro'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    nome_arquivo = models.CharField(max_length=255)
    url_arquivo = models.CharField(max_length=500)
    tipo_arquivo = models.CharField(max_length=10, choices=TIPO_ARQUIVO_CHOICES, default='pdf')
    tamanho_arquivo = models.PositiveIntegerField(default=0)
    categoria = models.CharField(max_length=20, choices=CATEGORIA_CHOICES, default='other')

    projeto = models.ForeignKey(
        Projeto,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='documentos'
    )
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='documentos'
    )

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'documento'
        ordering = ['-criado_em', '-id']

    def __str__(self):
        return self.titulo

    def para_dict(self):
        return {
            'id': self.id,
            'title': self.titulo,
            'description': self.descricao,
            'fileName': self.nome_arquivo,
            'fileUrl': self.url_arquivo,
            'fileType': self.tipo_arquivo,
            'fileSize': self.tamanho_arquivo,
            'category': self.categoria,
            'projectId': self.projeto_id,
            'userId': self.usuario_id,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }
