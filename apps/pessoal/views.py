# apps/pessoal/views.py

from apps.core.utils import (
    ErroRequisicao,
    api_view,
    buscar_ou_404,
    buscar_usuario,
    campos_obrigatorios,
    json_resposta,
    ler_json,
    parse_bool,
    parse_data_valor,
    parse_id,
    validar_escolha,
)
from apps.notificacoes.models import Notificacao
from apps.notificacoes.services import notificacao_service

from .models import Nota, RegistroAutocuidado
from .services import autocuidado_service


# =================== NOTAS ===================

def _aplicar_dados_nota(nota, dados):
    if 'title' in dados:
        nota.titulo = dados['title'] or ''
    if 'content' in dados:
        if not dados['content']:
            raise ErroRequisicao('content não pode ser vazio')
        nota.conteudo = dados['content']
    if 'type' in dados:
        nota.tipo = validar_escolha(dados['type'], Nota.TIPO_CHOICES, 'type')
    if 'pinned' in dados:
        nota.fixada = bool(parse_bool(dados['pinned']))


@api_view(['GET', 'POST'], mensagem_erro='Erro ao processar notas')
def notas_view(request):
    """
    GET: notas de userId (fixadas primeiro), filtros type e pinned
    POST: cria nota
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        notas = Nota.objects.filter(usuario_id=usuario_id)

        tipo = request.GET.get('type')
        if tipo:
            notas = notas.filter(tipo=validar_escolha(tipo, Nota.TIPO_CHOICES, 'type'))

        fixada = parse_bool(request.GET.get('pinned'))
        if fixada is not None:
            notas = notas.filter(fixada=fixada)

        return json_resposta([n.para_dict() for n in notas])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'content', 'userId', mensagem='content e userId são obrigatórios')

    nota = Nota(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_nota(nota, dados)
    nota.save()

    return json_resposta(nota.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'], mensagem_erro='Erro ao processar nota')
def nota_detalhe_view(request, nota_id):
    nota = buscar_ou_404(Nota, 'Nota não encontrada', id=nota_id)

    if request.method == 'GET':
        return json_resposta(nota.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_nota(nota, ler_json(request))
        nota.save()
        return json_resposta(nota.para_dict())

    nota.delete()
    return json_resposta({'message': 'Nota excluída com sucesso'})


@api_view(['POST'])
def compartilhar_nota_view(request, nota_id):
    nota = buscar_ou_404(Nota.objects.select_related('usuario'), 'Nota não encontrada', id=nota_id)
    usuarios_ids, remetente = notificacao_service.ler_pedido_compartilhamento(ler_json(request), nota.usuario)

    titulo_nota = nota.titulo or nota.get_tipo_display()
    notificacoes = notificacao_service.compartilhar_recurso(
        usuarios_ids,
        remetente,
        tipo=Notificacao.Tipo.NOTA_COMPARTILHADA,
        recurso='note',
        recurso_id=nota.id,
        titulo='Nota compartilhada',
        mensagem=f"{remetente.nome_exibicao} compartilhou a nota \"{titulo_nota}\" com você",
    )

    return json_resposta({
        'message': 'Nota compartilhada com sucesso',
        'notifications': [n.para_dict() for n in notificacoes],
    }, status=201)


# =================== AUTOCUIDADO ===================

def _aplicar_dados_registro(registro, dados):
    if 'type' in dados:
        registro.tipo = validar_escolha(dados['type'], RegistroAutocuidado.TIPO_CHOICES, 'type')
    if 'value' in dados:
        if dados['value'] in (None, ''):
            raise ErroRequisicao('value não pode ser vazio')
        registro.valor = str(dados['value'])
    if dados.get('date'):
        registro.data = parse_data_valor(dados['date'], 'date')
    if 'notes' in dados:
        registro.observacoes = dados['notes'] or ''


@api_view(['GET', 'POST'])
def autocuidado_view(request):
    """
    GET: registros de userId (mais recentes primeiro)
    POST: novo registro (data de hoje quando omitida)
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        registros = RegistroAutocuidado.objects.filter(usuario_id=usuario_id)

        tipo = request.GET.get('type')
        if tipo:
            registros = registros.filter(
                tipo=validar_escolha(tipo, RegistroAutocuidado.TIPO_CHOICES, 'type')
            )

        return json_resposta([r.para_dict() for r in registros])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'type', 'value', 'userId', mensagem='type, value e userId são obrigatórios')

    registro = RegistroAutocuidado(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_registro(registro, dados)
    registro.save()

    return json_resposta(registro.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def registro_autocuidado_detalhe_view(request, registro_id):
    registro = buscar_ou_404(RegistroAutocuidado, 'Registro não encontrado', id=registro_id)

    if request.method == 'GET':
        return json_resposta(registro.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_registro(registro, ler_json(request))
        registro.save()
        return json_resposta(registro.para_dict())

    registro.delete()
    return json_resposta({'message': 'Registro excluído com sucesso'})


@api_view(['GET'])
def metricas_autocuidado_view(request):
    """Métricas do dia: dias ativos, humor, sono e gratidão"""
    usuario = buscar_usuario(request.GET.get('userId'))
    dia = parse_data_valor(request.GET.get('date'), 'date')
    return json_resposta(autocuidado_service.metricas(usuario, dia))
