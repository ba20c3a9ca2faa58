# apps/agenda/views.py

import logging

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.utils import timezone
from django.views.decorators.http import require_GET

from apps.core.utils import (
    ErroRequisicao,
    api_view,
    buscar_ou_404,
    buscar_usuario,
    campos_obrigatorios,
    json_erro,
    json_resposta,
    ler_json,
    parse_bool,
    parse_data_valor,
    parse_decimal,
    parse_hora,
    parse_id,
    parse_lista_ids,
    validar_escolha,
)

from .feriados import ErroFeriados, buscar_feriados
from .models import CompartilhamentoEvento, Evento
from .services import compartilhamento_service

logger = logging.getLogger(__name__)


def _aplicar_dados_evento(evento, dados):
    """Copia os campos enviados pelo cliente para o evento"""
    if 'title' in dados:
        if not dados['title']:
            raise ErroRequisicao('title não pode ser vazio')
        evento.titulo = dados['title']
    if 'description' in dados:
        evento.descricao = dados['description'] or ''
    if 'date' in dados:
        evento.data = parse_data_valor(dados['date'], 'date', obrigatorio=True)
    if 'time' in dados:
        evento.hora = parse_hora(dados['time'])
    if 'location' in dados:
        evento.local = dados['location'] or ''
    if 'fee' in dados:
        evento.valor_cache = parse_decimal(dados['fee'], 'fee')
    if 'status' in dados:
        evento.status = validar_escolha(dados['status'], Evento.STATUS_CHOICES, 'status')
    if 'isShared' in dados:
        evento.compartilhado = bool(dados['isShared'])


# =================== EVENTOS ===================

@api_view(['GET', 'POST'], mensagem_erro='Erro ao processar eventos')
def eventos_view(request):
    """
    GET: eventos visíveis para userId (próprios + convites aceitos)
    POST: cria evento
    """
    if request.method == 'GET':
        usuario = buscar_usuario(request.GET.get('userId'))
        eventos = Evento.objects.visiveis_para(usuario)
        return json_resposta([evento.para_dict() for evento in eventos])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'title', 'date', 'userId', mensagem='title, date e userId são obrigatórios')

    usuario = buscar_usuario(dados['userId'])
    criado_por_id = parse_id(dados.get('createdBy'), 'createdBy', obrigatorio=False)

    evento = Evento(usuario=usuario)
    evento.criado_por = buscar_usuario(criado_por_id, 'createdBy') if criado_por_id else usuario
    _aplicar_dados_evento(evento, dados)
    evento.save()

    logger.info(f"Evento {evento.id} criado para usuário {usuario.id}")
    return json_resposta(evento.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'], mensagem_erro='Erro ao processar evento')
def evento_detalhe_view(request, evento_id):
    evento = buscar_ou_404(Evento, 'Evento não encontrado', id=evento_id)

    if request.method == 'GET':
        return json_resposta(evento.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_evento(evento, ler_json(request))
        evento.save()
        return json_resposta(evento.para_dict())

    evento.delete()
    logger.info(f"Evento {evento_id} excluído")
    return json_resposta({'message': 'Evento excluído com sucesso'})


# =================== COMPARTILHAMENTOS ===================

@api_view(['GET', 'POST'])
def compartilhamentos_view(request):
    """
    GET: convites recebidos por userId (filtros eventId e status)
    POST: compartilha um evento com vários usuários
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        compartilhamentos = CompartilhamentoEvento.objects.filter(
            usuario_id=usuario_id
        ).select_related('evento', 'usuario')

        evento_id = parse_id(request.GET.get('eventId'), 'eventId', obrigatorio=False)
        if evento_id:
            compartilhamentos = compartilhamentos.filter(evento_id=evento_id)

        status = request.GET.get('status')
        if status:
            compartilhamentos = compartilhamentos.filter(
                status=validar_escolha(status, CompartilhamentoEvento.STATUS_CHOICES, 'status')
            )

        return json_resposta([c.para_dict() for c in compartilhamentos])

    dados = ler_json(request)
    if not dados.get('eventId') or not dados.get('userIds'):
        raise ErroRequisicao('eventId e userIds são obrigatórios')

    evento = buscar_ou_404(Evento, 'Evento não encontrado', id=parse_id(dados['eventId'], 'eventId'))
    usuarios_ids = parse_lista_ids(dados['userIds'])

    compartilhado_por = None
    if dados.get('sharedBy'):
        compartilhado_por = buscar_usuario(dados['sharedBy'], 'sharedBy')

    compartilhamentos = compartilhamento_service.compartilhar_evento(
        evento, usuarios_ids, compartilhado_por
    )

    return json_resposta([c.para_dict() for c in compartilhamentos], status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def compartilhamento_detalhe_view(request, compartilhamento_id):
    compartilhamento = buscar_ou_404(
        CompartilhamentoEvento.objects.select_related('evento', 'usuario'),
        'Compartilhamento não encontrado',
        id=compartilhamento_id,
    )

    if request.method == 'GET':
        return json_resposta(compartilhamento.para_dict())

    if request.method == 'PUT':
        dados = ler_json(request)
        campos_obrigatorios(dados, 'status', mensagem='status é obrigatório')
        compartilhamento_service.atualizar_status(compartilhamento, dados['status'])
        return json_resposta(compartilhamento.para_dict())

    compartilhamento.delete()
    logger.info(f"Compartilhamento {compartilhamento_id} excluído")
    return json_resposta({'message': 'Compartilhamento deletado com sucesso'})


# =================== FERIADOS ===================

@transaction.non_atomic_requests
@require_GET
async def feriados_view(request):
    """
    Feriados nacionais do ano pedido (padrão: ano atual)

    Resposta da BrasilAPI fica em cache por ano.
    """
    ano_param = request.GET.get('year') or str(timezone.localdate().year)
    if not ano_param.isdigit() or len(ano_param) != 4:
        return json_erro('year inválido')

    ano = int(ano_param)
    chave_cache = f"feriados:{ano}"

    feriados = await cache.aget(chave_cache)
    if feriados is not None:
        return json_resposta(feriados)

    try:
        feriados = await buscar_feriados(ano)
    except ErroFeriados:
        logger.exception(f"Erro ao buscar feriados de {ano}")
        return json_erro('Erro ao buscar feriados', status=500)

    await cache.aset(chave_cache, feriados, settings.UNK_FERIADOS_CACHE_SEGUNDOS)
    return json_resposta(feriados)
