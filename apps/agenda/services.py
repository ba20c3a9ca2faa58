# apps/agenda/services.py

"""
Serviço de Compartilhamento de Eventos

Compartilhar um evento marca o evento como compartilhado, cria um convite
pendente para cada usuário ainda não convidado e notifica esses usuários.
Tudo roda na transação da requisição: ou todos os passos valem, ou nenhum.
"""

import logging
from typing import Iterable, List

from apps.core.utils import ErroRequisicao, validar_escolha
from apps.notificacoes.models import Notificacao
from apps.notificacoes.services import notificacao_service

from .models import CompartilhamentoEvento, Evento

logger = logging.getLogger(__name__)


class CompartilhamentoService:
    """Convites de eventos e suas transições de status"""

    def compartilhar_evento(
        self,
        evento: Evento,
        usuarios_ids: Iterable[int],
        compartilhado_por=None,
    ) -> List[CompartilhamentoEvento]:
        """
        Convida usuários para um evento

        Convites existentes não são tocados (um convite aceito continua
        aceito). Só usuários recém-convidados recebem notificação.

        Returns:
            Os convites de todos os usuários pedidos, novos e existentes
        """
        usuarios = notificacao_service.carregar_usuarios(usuarios_ids)

        if any(usuario.id == evento.usuario_id for usuario in usuarios):
            raise ErroRequisicao('Não é possível compartilhar o evento com o próprio dono')

        remetente = compartilhado_por or evento.usuario

        if not evento.compartilhado:
            evento.compartilhado = True
            evento.save(update_fields=['compartilhado', 'atualizado_em'])

        existentes = {
            compartilhamento.usuario_id: compartilhamento
            for compartilhamento in evento.compartilhamentos.select_related('usuario')
        }

        compartilhamentos = []
        novos = 0
        for usuario in usuarios:
            compartilhamento = existentes.get(usuario.id)

            if compartilhamento is None:
                compartilhamento = CompartilhamentoEvento.objects.create(
                    evento=evento,
                    usuario=usuario,
                    compartilhado_por=remetente,
                )
                self._notificar_convite(compartilhamento, remetente)
                novos += 1

            compartilhamentos.append(compartilhamento)

        logger.info(f"Evento {evento.id} compartilhado: {novos} novo(s) convite(s)")
        return compartilhamentos

    def atualizar_status(self, compartilhamento: CompartilhamentoEvento, status) -> CompartilhamentoEvento:
        """Valida o status pedido e aplica a transição (400/409)"""
        validar_escolha(status, CompartilhamentoEvento.STATUS_CHOICES, 'status')

        if compartilhamento.alterar_status(status):
            logger.info(f"Convite {compartilhamento.id} alterado para {status}")

        return compartilhamento

    # =================== MÉTODOS PRIVADOS ===================

    def _notificar_convite(self, compartilhamento: CompartilhamentoEvento, remetente):
        evento = compartilhamento.evento
        nome_remetente = remetente.nome_exibicao if remetente else 'Alguém'

        notificacao_service.criar_notificacao(
            compartilhamento.usuario,
            'Novo evento compartilhado',
            f"{nome_remetente} compartilhou o evento \"{evento.titulo}\" com você",
            tipo=Notificacao.Tipo.EVENTO_COMPARTILHADO,
            evento=evento,
            compartilhamento=compartilhamento,
            recurso='event',
            recurso_id=evento.id,
        )


# Instância global do serviço
compartilhamento_service = CompartilhamentoService()
