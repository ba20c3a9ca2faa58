# apps/financas/services.py

"""
Serviço Financeiro - atribuição de receitas e resumo do saldo

Regras de atribuição:
- Só administradores atribuem transações (403)
- O destino precisa ser um DJ (400)
- Só receitas podem ser atribuídas (400)
- O DJ recebe uma notificação 'transaction_assigned'
"""

import logging
from decimal import Decimal
from typing import Dict

from django.db.models import Q, Sum

from apps.core.permissions import UnkPermissions, exigir_permissao
from apps.core.utils import ErroRequisicao, valor_monetario
from apps.notificacoes.models import Notificacao
from apps.notificacoes.services import notificacao_service

from .models import DespesaFixa, Divida, Transacao

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


class FinanceiroService:
    """Regras de negócio das finanças"""

    def validar_atribuicao(self, criador, destinatario, tipo: str):
        """Verifica as regras de atribuição de uma transação"""
        exigir_permissao(
            UnkPermissions.pode_atribuir_transacao(criador),
            'Apenas administradores podem atribuir transações'
        )

        if not UnkPermissions.pode_receber_atribuicao(destinatario):
            raise ErroRequisicao('Transações só podem ser atribuídas a DJs')

        if tipo != Transacao.TIPO_RECEITA:
            raise ErroRequisicao('Apenas receitas podem ser atribuídas')

    def notificar_atribuicao(self, transacao: Transacao):
        """Avisa o DJ que uma receita foi atribuída a ele"""
        notificacao_service.criar_notificacao(
            transacao.atribuida_a,
            'Nova receita atribuída',
            f"{transacao.descricao} - R$ {transacao.valor:.2f} foi atribuída a você",
            tipo=Notificacao.Tipo.TRANSACAO_ATRIBUIDA,
            recurso='transaction',
            recurso_id=transacao.id,
        )

        logger.info(
            f"Transação {transacao.id} atribuída ao usuário {transacao.atribuida_a_id} "
            f"por {transacao.usuario_id}"
        )

    def resumo(self, usuario) -> Dict:
        """
        Totais financeiros do usuário

        Receitas: receitas próprias não atribuídas + receitas atribuídas a ele.
        Saldo: receitas - despesas - despesas fixas ativas - dívidas restantes.
        """
        receitas = Transacao.objects.filter(tipo=Transacao.TIPO_RECEITA).filter(
            Q(usuario=usuario, atribuida_a__isnull=True) | Q(atribuida_a=usuario)
        ).aggregate(total=Sum('valor'))['total'] or ZERO

        despesas = Transacao.objects.filter(
            tipo=Transacao.TIPO_DESPESA,
            usuario=usuario,
        ).aggregate(total=Sum('valor'))['total'] or ZERO

        despesas_fixas = DespesaFixa.objects.filter(
            usuario=usuario,
            ativa=True,
        ).aggregate(total=Sum('valor'))['total'] or ZERO

        dividas = Divida.objects.filter(
            usuario=usuario,
        ).aggregate(total=Sum('valor_restante'))['total'] or ZERO

        saldo = receitas - despesas - despesas_fixas - dividas

        return {
            'userId': usuario.id,
            'income': valor_monetario(receitas),
            'expenses': valor_monetario(despesas),
            'fixedExpenses': valor_monetario(despesas_fixas),
            'debts': valor_monetario(dividas),
            'balance': valor_monetario(saldo),
        }


# Instância global do serviço
financeiro_service = FinanceiroService()
