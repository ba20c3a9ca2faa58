# apps/core/views.py

import logging

from django.core.cache import cache
from django.db import connection

from .auth_service import auth_service
from .models import ConfiguracaoEmpresa, Usuario
from .utils import (
    ErroRequisicao,
    api_view,
    buscar_ou_404,
    json_resposta,
    ler_json,
    parse_id,
    validar_escolha,
)

logger = logging.getLogger(__name__)


# =================== AUTENTICAÇÃO ===================

@api_view(['POST'])
def login_view(request):
    """Login por email e senha"""
    dados = ler_json(request)

    usuario = auth_service.fazer_login(dados.get('email'), dados.get('password'))

    return json_resposta({
        'user': usuario.para_dict(completo=True),
        'message': 'Login realizado com sucesso',
    })


@api_view(['POST'])
def cadastro_view(request):
    """Cadastro de novo usuário"""
    dados = ler_json(request)

    usuario = auth_service.registrar_usuario(dados)

    return json_resposta({
        'user': usuario.para_dict(completo=True),
        'message': 'Usuário cadastrado com sucesso',
    }, status=201)


# =================== USUÁRIOS ===================

# Campos do perfil editáveis pelo cliente: chave JSON -> atributo do model
CAMPOS_PERFIL = {
    'name': 'nome',
    'bio': 'bio',
    'avatar': 'avatar',
    'portfolio': 'portfolio',
    'phone': 'telefone',
    'location': 'localizacao',
    'pixKey': 'chave_pix',
    'socialMedia': 'redes_sociais',
}


@api_view(['GET'])
def usuarios_view(request):
    """
    Lista usuários ordenados por nome

    Filtros opcionais: excludeId (ex.: o próprio usuário ao compartilhar) e role
    """
    usuarios = Usuario.objects.filter(is_active=True)

    excluir_id = parse_id(request.GET.get('excludeId'), 'excludeId', obrigatorio=False)
    if excluir_id:
        usuarios = usuarios.exclude(id=excluir_id)

    tipo = request.GET.get('role')
    if tipo:
        usuarios = usuarios.filter(tipo=validar_escolha(tipo, Usuario.TIPO_CHOICES, 'role'))

    return json_resposta([usuario.para_dict() for usuario in usuarios.order_by('nome')])


@api_view(['GET', 'PUT'])
def usuario_detalhe_view(request, usuario_id):
    usuario = buscar_ou_404(Usuario, 'Usuário não encontrado', id=usuario_id)

    if request.method == 'PUT':
        dados = ler_json(request)

        for chave, atributo in CAMPOS_PERFIL.items():
            if chave in dados:
                valor = dados[chave]
                if chave == 'socialMedia':
                    if not isinstance(valor, dict):
                        raise ErroRequisicao('socialMedia deve ser um objeto')
                elif valor is None:
                    valor = ''
                elif not isinstance(valor, str):
                    raise ErroRequisicao(f'{chave} deve ser um texto')
                setattr(usuario, atributo, valor)

        if not usuario.nome.strip():
            raise ErroRequisicao('name não pode ser vazio')

        usuario.save()
        logger.info(f"Perfil atualizado: {usuario.email}")

    return json_resposta(usuario.para_dict(completo=True))


# =================== CONFIGURAÇÕES DA EMPRESA ===================

CAMPOS_CONFIGURACAO = {
    'name': 'nome',
    'logo': 'logo',
    'description': 'descricao',
    'website': 'website',
    'email': 'email',
    'phone': 'telefone',
    'address': 'endereco',
    'socialMedia': 'redes_sociais',
    'theme': 'tema',
}


def _aplicar_configuracao(configuracao, dados):
    for chave, atributo in CAMPOS_CONFIGURACAO.items():
        if chave in dados:
            valor = dados[chave]
            if chave in ('socialMedia', 'theme') and not isinstance(valor, dict):
                raise ErroRequisicao(f'{chave} deve ser um objeto')
            setattr(configuracao, atributo, valor if valor is not None else '')


@api_view(['GET', 'POST', 'PUT'])
def configuracao_empresa_view(request):
    """
    Configurações da agência (registro único)

    GET: 404 enquanto não configurado
    POST: cria (409 se já existir)
    PUT: atualiza (404 se não existir)
    """
    configuracao = ConfiguracaoEmpresa.atual()

    if request.method == 'GET':
        if configuracao is None:
            raise ErroRequisicao('Configurações não encontradas', status=404)
        return json_resposta(configuracao.para_dict())

    dados = ler_json(request)

    if request.method == 'POST':
        if configuracao is not None:
            raise ErroRequisicao('Configurações já existem', status=409)

        configuracao = ConfiguracaoEmpresa()
        _aplicar_configuracao(configuracao, dados)
        configuracao.save()
        logger.info("Configurações da empresa criadas")
        return json_resposta(configuracao.para_dict(), status=201)

    if configuracao is None:
        raise ErroRequisicao('Configurações não encontradas', status=404)

    _aplicar_configuracao(configuracao, dados)
    configuracao.save()
    return json_resposta(configuracao.para_dict())


# =================== SAÚDE ===================

@api_view(['GET'])
def health_check_view(request):
    """Verifica banco de dados e cache"""
    status = {'database': 'ok', 'cache': 'ok'}

    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except Exception:
        logger.exception("Health check: banco de dados indisponível")
        status['database'] = 'error'

    try:
        cache.set('health_check', 'ok', 10)
        if cache.get('health_check') != 'ok':
            status['cache'] = 'error'
    except Exception:
        logger.exception("Health check: cache indisponível")
        status['cache'] = 'error'

    saudavel = all(valor == 'ok' for valor in status.values())
    status['status'] = 'healthy' if saudavel else 'unhealthy'

    return json_resposta(status, status=200 if saudavel else 503)
