# apps/notificacoes/views.py

import logging

from apps.agenda.models import Evento, TransicaoInvalida
from apps.core.permissions import UnkPermissions, exigir_permissao
from apps.core.utils import (
    ErroRequisicao,
    api_view,
    buscar_ou_404,
    buscar_usuario,
    campos_obrigatorios,
    json_resposta,
    ler_json,
    parse_bool,
    parse_id,
    validar_escolha,
)

from .models import Notificacao
from .services import notificacao_service

logger = logging.getLogger(__name__)


def _buscar_notificacao(notificacao_id):
    return buscar_ou_404(
        Notificacao.objects.select_related('compartilhamento'),
        'Notificação não encontrada',
        id=notificacao_id,
    )


@api_view(['GET', 'POST'])
def notificacoes_view(request):
    """
    GET: notificações de userId (filtros type e isRead)
    POST: cria notificação avulsa
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        notificacoes = Notificacao.objects.filter(
            destinatario_id=usuario_id
        ).select_related('compartilhamento')

        tipo = request.GET.get('type')
        if tipo:
            notificacoes = notificacoes.filter(tipo=tipo)

        lida = parse_bool(request.GET.get('isRead'))
        if lida is not None:
            notificacoes = notificacoes.filter(lida=lida)

        return json_resposta([n.para_dict() for n in notificacoes])

    dados = ler_json(request)
    campos_obrigatorios(
        dados, 'title', 'message', 'userId',
        mensagem='title, message e userId são obrigatórios'
    )

    destinatario = buscar_usuario(dados['userId'])
    tipo = validar_escolha(dados.get('type') or Notificacao.Tipo.GERAL, Notificacao.Tipo.choices, 'type')

    evento = None
    evento_id = parse_id(dados.get('eventId'), 'eventId', obrigatorio=False)
    if evento_id:
        evento = buscar_ou_404(Evento, 'Evento não encontrado', id=evento_id)

    notificacao = notificacao_service.criar_notificacao(
        destinatario,
        dados['title'],
        dados['message'],
        tipo=tipo,
        evento=evento,
    )

    return json_resposta(notificacao.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def notificacao_detalhe_view(request, notificacao_id):
    notificacao = _buscar_notificacao(notificacao_id)

    if request.method == 'GET':
        return json_resposta(notificacao.para_dict())

    if request.method == 'PUT':
        dados = ler_json(request)

        if 'title' in dados:
            notificacao.titulo = dados['title']
        if 'message' in dados:
            notificacao.mensagem = dados['message']
        notificacao.save()

        if 'isRead' in dados:
            if parse_bool(dados['isRead']):
                notificacao.marcar_como_lida()
            elif notificacao.lida:
                notificacao.lida = False
                notificacao.lida_em = None
                notificacao.save(update_fields=['lida', 'lida_em'])

        return json_resposta(notificacao.para_dict())

    notificacao.delete()
    return json_resposta({'message': 'Notificação excluída com sucesso'})


@api_view(['PUT', 'POST'])
def marcar_todas_lidas_view(request):
    """Marca todas as notificações de userId como lidas"""
    dados = ler_json(request)
    usuario = buscar_usuario(request.GET.get('userId') or dados.get('userId'))

    total = Notificacao.marcar_todas_como_lidas(usuario, tipo=dados.get('type'))

    logger.info(f"{total} notificação(ões) marcadas como lidas para usuário {usuario.id}")
    return json_resposta({'message': 'Notificações marcadas como lidas', 'count': total})


@api_view(['POST', 'PUT'])
def marcar_lida_view(request, notificacao_id):
    """Marca uma notificação como lida (idempotente)"""
    notificacao = _buscar_notificacao(notificacao_id)
    notificacao.marcar_como_lida()
    return json_resposta(notificacao.para_dict())


@api_view(['POST'])
def responder_notificacao_view(request, notificacao_id):
    """
    Aceita ou recusa o convite de evento da notificação

    Corpo: {"action": "accept" | "decline", "userId": opcional}
    """
    notificacao = _buscar_notificacao(notificacao_id)
    dados = ler_json(request)

    if dados.get('userId'):
        usuario = buscar_usuario(dados['userId'])
        exigir_permissao(
            UnkPermissions.pode_responder_notificacao(usuario, notificacao),
            'Apenas o destinatário pode responder a esta notificação'
        )

    if not dados.get('action'):
        raise ErroRequisicao('action é obrigatório')

    try:
        compartilhamento = notificacao_service.responder_compartilhamento(notificacao, dados['action'])
    except TransicaoInvalida as e:
        # Resposta direta (sem rollback) para manter a notificação lida
        logger.warning(f"Resposta recusada para notificação {notificacao.id}: {e.mensagem}")
        return json_resposta({'error': e.mensagem, 'notification': notificacao.para_dict()}, status=409)

    return json_resposta({
        'notification': notificacao.para_dict(),
        'share': compartilhamento.para_dict(),
    })
