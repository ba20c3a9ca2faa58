# apps/relatorios/utils.py

from collections import OrderedDict
from decimal import Decimal
from typing import Dict, List

from django.core.exceptions import SuspiciousFileOperation
from django.utils.text import get_valid_filename

from apps.financas.models import Transacao
from apps.financas.services import financeiro_service

CABECALHO_EXTRATO = [
    'Data', 'Tipo', 'Descrição', 'Categoria', 'Valor (R$)', 'Criada por', 'Atribuída a'
]


def transacoes_do_extrato(usuario):
    """Transações criadas pelo usuário ou atribuídas a ele, em ordem cronológica"""
    return (
        Transacao.objects.do_usuario(usuario)
        .select_related('usuario', 'atribuida_a')
        .order_by('data', 'id')
    )


def linha_extrato(transacao: Transacao) -> List:
    """Linha do extrato; despesas aparecem com valor negativo"""
    valor = transacao.valor if transacao.tipo == Transacao.TIPO_RECEITA else -transacao.valor
    return [
        transacao.data,
        transacao.get_tipo_display(),
        transacao.descricao,
        transacao.categoria,
        valor,
        transacao.usuario.nome_exibicao,
        transacao.atribuida_a.nome_exibicao if transacao.atribuida_a else '',
    ]


def totais_por_categoria(transacoes, usuario) -> Dict[str, Dict[str, Decimal]]:
    """
    Soma receitas e despesas por categoria

    Receitas atribuídas a outro usuário ficam fora, como no saldo.
    """
    categorias = OrderedDict()

    for transacao in transacoes:
        if transacao.atribuida_a_id and transacao.atribuida_a_id != usuario.id:
            continue

        categoria = transacao.categoria or 'Sem categoria'
        totais = categorias.setdefault(categoria, {'income': Decimal('0'), 'expense': Decimal('0')})
        totais[transacao.tipo] += transacao.valor

    return categorias


def gerar_relatorio_financeiro(usuario) -> Dict:
    """
    Dados completos do relatório financeiro

    Reúne o resumo do saldo, as transações e a quebra por categoria;
    usado pelo JSON e pelos arquivos exportados.
    """
    transacoes = list(transacoes_do_extrato(usuario))

    return {
        'usuario': usuario,
        'resumo': financeiro_service.resumo(usuario),
        'transacoes': transacoes,
        'categorias': totais_por_categoria(transacoes, usuario),
    }


def linhas_resumo(resumo: Dict) -> List[List]:
    """Pares rótulo/valor dos totais, na ordem exibida nos arquivos"""
    return [
        ['Receitas', resumo['income']],
        ['Despesas', resumo['expenses']],
        ['Despesas fixas', resumo['fixedExpenses']],
        ['Dívidas', resumo['debts']],
        ['Saldo', resumo['balance']],
    ]


def nome_arquivo(usuario, extensao: str) -> str:
    """Nome do arquivo exportado, seguro para o cabeçalho Content-Disposition"""
    try:
        nome = get_valid_filename(usuario.nome_exibicao)
    except SuspiciousFileOperation:
        nome = str(usuario.id)
    return f"relatorio_financeiro_{nome}.{extensao}"
