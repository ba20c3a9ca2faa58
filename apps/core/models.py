# apps/core/models.py

from django.conf import settings
from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models

from .utils import iso


class UsuarioManager(UserManager):
    """Cria usuários identificados pelo email"""

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('username', email)
        return super().create_user(email=email, password=password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('username', email)
        extra_fields.setdefault('tipo', 'admin')
        return super().create_superuser(email=email, password=password, **extra_fields)


class Usuario(AbstractUser):
    """
    Modelo de usuário customizado da Conexão UNK

    Dois perfis de acesso: administradores da agência e DJs agenciados.
    O login é feito por email; username é preenchido com o email.
    """

    TIPO_ADMIN = 'admin'
    TIPO_DJ = 'dj'

    TIPO_CHOICES = [
        (TIPO_ADMIN, 'Administrador'),
        (TIPO_DJ, 'DJ'),
    ]

    email = models.EmailField('email', unique=True)
    nome = models.CharField(max_length=200)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default=TIPO_DJ)

    # === PERFIL ===
    bio = models.TextField(blank=True)
    avatar = models.CharField(max_length=500, blank=True)
    portfolio = models.CharField(max_length=500, blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    localizacao = models.CharField(max_length=200, blank=True)
    chave_pix = models.CharField(max_length=200, blank=True)
    redes_sociais = models.JSONField(default=dict, blank=True)

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    objects = UsuarioManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['nome']

    class Meta:
        db_table = 'usuario'
        ordering = ['nome']
        indexes = [
            models.Index(fields=['tipo'], name='usuario_tipo_idx'),
        ]

    @property
    def eh_admin(self):
        return self.tipo == self.TIPO_ADMIN

    @property
    def eh_dj(self):
        return self.tipo == self.TIPO_DJ

    @property
    def nome_exibicao(self):
        return self.nome or self.get_full_name() or self.email

    def para_dict(self, completo=False):
        """
        Representação JSON do usuário

        A versão resumida é usada em listagens; a completa inclui o perfil.
        Nunca expõe o hash da senha.
        """
        dados = {
            'id': self.id,
            'email': self.email,
            'name': self.nome_exibicao,
            'role': self.tipo,
            'createdAt': iso(self.criado_em),
        }

        if completo:
            dados.update({
                'bio': self.bio,
                'avatar': self.avatar,
                'portfolio': self.portfolio,
                'phone': self.telefone,
                'location': self.localizacao,
                'pixKey': self.chave_pix,
                'socialMedia': self.redes_sociais,
                'updatedAt': iso(self.atualizado_em),
            })

        return dados

    def __str__(self):
        return f"{self.nome_exibicao} ({self.get_tipo_display()})"


class ConfiguracaoEmpresa(models.Model):
    """Configurações da agência (registro único)"""

    nome = models.CharField(max_length=200, default=settings.UNK_NOME_EMPRESA_PADRAO)
    logo = models.CharField(max_length=500, blank=True)
    descricao = models.TextField(blank=True)
    website = models.CharField(max_length=300, blank=True)
    email = models.EmailField(blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    endereco = models.CharField(max_length=300, blank=True)
    redes_sociais = models.JSONField(default=dict, blank=True)
    tema = models.JSONField(default=dict, blank=True)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'configuracao_empresa'
        verbose_name = 'Configuração da empresa'
        verbose_name_plural = 'Configurações da empresa'

    @classmethod
    def atual(cls):
        """Retorna o registro de configurações, ou None se ainda não criado"""
        return cls.objects.order_by('id').first()

    def para_dict(self):
        return {
            'id': self.id,
            'name': self.nome,
            'logo': self.logo,
            'description': self.descricao,
            'website': self.website,
            'email': self.email,
            'phone': self.telefone,
            'address': self.endereco,
            'socialMedia': self.redes_sociais,
            'theme': self.tema,
            'createdAt': iso(self.criado_em),
            'updatedAt': iso(self.atualizado_em),
        }

    def __str__(self):
        return self.nome
