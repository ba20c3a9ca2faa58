# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula a lógica de login e cadastro
Login por email com senha armazenada via hashers do Django
"""

import logging
from typing import Dict, Optional

from django.conf import settings
from django.contrib.auth.password_validation import validate_password
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.core.mail import send_mail
from django.core.validators import validate_email
from django.utils import timezone

from .models import Usuario
from .utils import ErroRequisicao

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para gerenciar autenticação

    - Métodos públicos: fazer_login, registrar_usuario
    - Métodos privados protegem validações e controle de tentativas
    """

    def __init__(self):
        self._max_login_attempts = 5
        self._lockout_duration_minutes = 15

    def fazer_login(self, email: str, password: str) -> Usuario:
        """
        Valida credenciais e retorna o usuário autenticado

        Raises:
            ErroRequisicao: 400 campos ausentes, 404 email desconhecido,
            401 senha incorreta, 429 conta bloqueada
        """
        if not email or not password:
            raise ErroRequisicao('Email e senha são obrigatórios')

        email = email.strip().lower()

        if self._conta_esta_bloqueada(email):
            raise ErroRequisicao(
                'Conta temporariamente bloqueada por muitas tentativas incorretas',
                status=429,
            )

        try:
            usuario = Usuario.objects.get(email__iexact=email)
        except Usuario.DoesNotExist:
            raise ErroRequisicao('Usuário não encontrado', status=404)

        if not usuario.is_active or not usuario.check_password(password):
            self._registrar_tentativa_falha(email)
            raise ErroRequisicao('Senha incorreta', status=401)

        self._resetar_tentativas_login(email)
        self._atualizar_ultimo_acesso(usuario)

        logger.info(f"Login realizado: {usuario.email}")
        return usuario

    def registrar_usuario(self, dados: Dict) -> Usuario:
        """
        Cria um novo usuário (DJ por padrão)

        Raises:
            ErroRequisicao: 400 dados inválidos, 409 email já cadastrado
        """
        self._validar_dados_cadastro(dados)

        email = dados['email'].strip().lower()
        if Usuario.objects.filter(email__iexact=email).exists():
            raise ErroRequisicao('Email já cadastrado', status=409)

        usuario = Usuario.objects.create_user(
            username=email,
            email=email,
            password=dados['password'],
            nome=dados['name'].strip(),
            tipo=dados.get('role') or Usuario.TIPO_DJ,
        )

        self._enviar_email_boas_vindas(usuario)

        logger.info(f"Usuário cadastrado: {usuario.email} ({usuario.tipo})")
        return usuario

    # =================== MÉTODOS PRIVADOS ===================

    def _validar_dados_cadastro(self, dados: Dict):
        """Valida dados de entrada do cadastro"""
        for campo in ('email', 'password', 'name'):
            valor = dados.get(campo)
            if not isinstance(valor, str) or not valor.strip():
                raise ErroRequisicao(f'Campo {campo} é obrigatório')

        try:
            validate_email(dados['email'].strip())
        except ValidationError:
            raise ErroRequisicao('Email inválido')

        tipos_validos = [tipo for tipo, _ in Usuario.TIPO_CHOICES]
        if dados.get('role') and dados['role'] not in tipos_validos:
            raise ErroRequisicao(f"role deve ser um de: {', '.join(tipos_validos)}")

        try:
            validate_password(dados['password'])
        except ValidationError as e:
            raise ErroRequisicao(' '.join(e.messages))

    def _chave_tentativas(self, email: str) -> str:
        return f"login_tentativas:{email}"

    def _conta_esta_bloqueada(self, email: str) -> bool:
        """Verifica se a conta excedeu o limite de tentativas"""
        return cache.get(self._chave_tentativas(email), 0) >= self._max_login_attempts

    def _registrar_tentativa_falha(self, email: str):
        """Incrementa o contador de tentativas no cache"""
        chave = self._chave_tentativas(email)
        tentativas = cache.get(chave, 0) + 1
        cache.set(chave, tentativas, self._lockout_duration_minutes * 60)
        logger.warning(f"Tentativa de login falhada para {email} ({tentativas})")

    def _resetar_tentativas_login(self, email: str):
        cache.delete(self._chave_tentativas(email))

    def _atualizar_ultimo_acesso(self, usuario: Usuario):
        usuario.last_login = timezone.now()
        usuario.save(update_fields=['last_login'])

    def _enviar_email_boas_vindas(self, usuario: Usuario):
        """Envia email de boas-vindas ao novo usuário"""
        assunto = f"Bem-vindo(a) à {settings.UNK_NOME_EMPRESA_PADRAO}!"
        mensagem = (
            f"Olá, {usuario.nome_exibicao}!\n\n"
            f"Sua conta na {settings.UNK_NOME_EMPRESA_PADRAO} foi criada com sucesso.\n"
            f"Acesse com o email {usuario.email}.\n"
        )

        try:
            send_mail(
                assunto,
                mensagem,
                settings.DEFAULT_FROM_EMAIL,
                [usuario.email],
                fail_silently=False,
            )
        except Exception:
            logger.exception(f"Falha ao enviar email de boas-vindas para {usuario.email}")


# Instância global do serviço
auth_service = AuthenticationService()
