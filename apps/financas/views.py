# apps/financas/views.py

import logging

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
    parse_decimal,
    parse_id,
    validar_escolha,
)

from .models import DespesaFixa, Divida, Transacao
from .services import financeiro_service

logger = logging.getLogger(__name__)


# =================== TRANSAÇÕES ===================

def _aplicar_dados_transacao(transacao, dados):
    if 'type' in dados:
        transacao.tipo = validar_escolha(dados['type'], Transacao.TIPO_CHOICES, 'type')
    if 'amount' in dados:
        valor = parse_decimal(dados['amount'], 'amount', obrigatorio=True)
        if valor < 0:
            raise ErroRequisicao('amount não pode ser negativo')
        transacao.valor = valor
    if 'description' in dados:
        transacao.descricao = dados['description'] or ''
    if 'category' in dados:
        transacao.categoria = dados['category'] or ''
    if 'date' in dados:
        transacao.data = parse_data_valor(dados['date'], 'date', obrigatorio=True)
    if 'receiptUrl' in dados:
        transacao.comprovante_url = dados['receiptUrl'] or ''


@api_view(['GET', 'POST'])
def transacoes_view(request):
    """
    GET: transações criadas por userId ou atribuídas a ele (mais recentes primeiro)
    POST: cria transação, opcionalmente atribuída a um DJ
    """
    if request.method == 'GET':
        usuario = buscar_usuario(request.GET.get('userId'))
        transacoes = Transacao.objects.do_usuario(usuario).select_related('usuario', 'atribuida_a')

        tipo = request.GET.get('type')
        if tipo:
            transacoes = transacoes.filter(tipo=validar_escolha(tipo, Transacao.TIPO_CHOICES, 'type'))

        return json_resposta([t.para_dict() for t in transacoes])

    dados = ler_json(request)
    campos_obrigatorios(
        dados, 'type', 'amount', 'description', 'date', 'userId',
        mensagem='type, amount, description, date e userId são obrigatórios'
    )

    criador = buscar_usuario(dados['userId'])
    transacao = Transacao(usuario=criador)
    _aplicar_dados_transacao(transacao, dados)

    atribuida_a_id = parse_id(dados.get('assignedTo'), 'assignedTo', obrigatorio=False)
    if atribuida_a_id:
        destinatario = buscar_usuario(atribuida_a_id, 'assignedTo')
        financeiro_service.validar_atribuicao(criador, destinatario, transacao.tipo)
        transacao.atribuida_a = destinatario

    transacao.save()

    if transacao.atribuida_a_id:
        financeiro_service.notificar_atribuicao(transacao)

    logger.info(f"Transação {transacao.id} ({transacao.tipo}) criada por usuário {criador.id}")
    return json_resposta(transacao.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def transacao_detalhe_view(request, transacao_id):
    transacao = buscar_ou_404(
        Transacao.objects.select_related('usuario', 'atribuida_a'),
        'Transação não encontrada',
        id=transacao_id,
    )

    if request.method == 'GET':
        return json_resposta(transacao.para_dict())

    if request.method == 'PUT':
        dados = ler_json(request)
        atribuicao_anterior = transacao.atribuida_a_id
        _aplicar_dados_transacao(transacao, dados)

        if 'assignedTo' in dados:
            atribuida_a_id = parse_id(dados['assignedTo'], 'assignedTo', obrigatorio=False)
            transacao.atribuida_a = buscar_usuario(atribuida_a_id, 'assignedTo') if atribuida_a_id else None

        if transacao.atribuida_a_id:
            financeiro_service.validar_atribuicao(transacao.usuario, transacao.atribuida_a, transacao.tipo)

        transacao.save()

        if transacao.atribuida_a_id and transacao.atribuida_a_id != atribuicao_anterior:
            financeiro_service.notificar_atribuicao(transacao)

        return json_resposta(transacao.para_dict())

    transacao.delete()
    logger.info(f"Transação {transacao_id} excluída")
    return json_resposta({'message': 'Transação excluída com sucesso'})


# =================== DESPESAS FIXAS ===================

def _aplicar_dados_despesa_fixa(despesa, dados):
    descricao = dados.get('description', dados.get('name'))
    if descricao is not None:
        despesa.descricao = descricao
    if 'amount' in dados:
        despesa.valor = parse_decimal(dados['amount'], 'amount', obrigatorio=True)
    if 'category' in dados:
        despesa.categoria = dados['category'] or ''
    if 'dueDay' in dados:
        dia = parse_id(dados['dueDay'], 'dueDay')
        if not 1 <= dia <= 31:
            raise ErroRequisicao('dueDay deve estar entre 1 e 31')
        despesa.dia_vencimento = dia
    if 'isActive' in dados:
        despesa.ativa = bool(parse_bool(dados['isActive']))


@api_view(['GET', 'POST'])
def despesas_fixas_view(request):
    if request.method == 'GET':
        usuario = buscar_usuario(request.GET.get('userId'))
        despesas = DespesaFixa.objects.filter(usuario=usuario)

        ativa = parse_bool(request.GET.get('isActive'))
        if ativa is not None:
            despesas = despesas.filter(ativa=ativa)

        return json_resposta([d.para_dict() for d in despesas])

    dados = ler_json(request)
    if not (dados.get('description') or dados.get('name')) or dados.get('amount') in (None, '') or not dados.get('userId'):
        raise ErroRequisicao('description, amount e userId são obrigatórios')

    despesa = DespesaFixa(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_despesa_fixa(despesa, dados)
    despesa.save()

    return json_resposta(despesa.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def despesa_fixa_detalhe_view(request, despesa_id):
    despesa = buscar_ou_404(DespesaFixa, 'Despesa fixa não encontrada', id=despesa_id)

    if request.method == 'GET':
        return json_resposta(despesa.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_despesa_fixa(despesa, ler_json(request))
        despesa.save()
        return json_resposta(despesa.para_dict())

    despesa.delete()
    return json_resposta({'message': 'Despesa fixa excluída com sucesso'})


# =================== DÍVIDAS ===================

def _aplicar_dados_divida(divida, dados):
    descricao = dados.get('description', dados.get('name'))
    if descricao is not None:
        divida.descricao = descricao
    if 'creditor' in dados:
        divida.credor = dados['creditor'] or ''
    if 'totalAmount' in dados:
        divida.valor_total = parse_decimal(dados['totalAmount'], 'totalAmount', obrigatorio=True)
    if 'remainingAmount' in dados:
        divida.valor_restante = parse_decimal(dados['remainingAmount'], 'remainingAmount', obrigatorio=True)
    if 'monthlyPayment' in dados:
        divida.parcela_mensal = parse_decimal(dados['monthlyPayment'], 'monthlyPayment')
    if 'interestRate' in dados:
        divida.taxa_juros = parse_decimal(dados['interestRate'], 'interestRate', digitos_inteiros=4)
    if 'dueDate' in dados:
        divida.data_vencimento = parse_data_valor(dados['dueDate'], 'dueDate')

    if divida.valor_restante is None:
        divida.valor_restante = divida.valor_total

    if divida.valor_restante is not None and divida.valor_total is not None \
            and divida.valor_restante > divida.valor_total:
        raise ErroRequisicao('remainingAmount não pode ser maior que totalAmount')


@api_view(['GET', 'POST'])
def dividas_view(request):
    if request.method == 'GET':
        usuario = buscar_usuario(request.GET.get('userId'))
        dividas = Divida.objects.filter(usuario=usuario)
        return json_resposta([d.para_dict() for d in dividas])

    dados = ler_json(request)
    if not (dados.get('description') or dados.get('name')) or dados.get('totalAmount') in (None, '') \
            or not dados.get('userId'):
        raise ErroRequisicao('description, totalAmount e userId são obrigatórios')

    divida = Divida(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_divida(divida, dados)
    divida.save()

    return json_resposta(divida.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def divida_detalhe_view(request, divida_id):
    divida = buscar_ou_404(Divida, 'Dívida não encontrada', id=divida_id)

    if request.method == 'GET':
        return json_resposta(divida.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_divida(divida, ler_json(request))
        divida.save()
        return json_resposta(divida.para_dict())

    divida.delete()
    return json_resposta({'message': 'Dívida excluída com sucesso'})
