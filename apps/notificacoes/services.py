# apps/notificacoes/services.py

"""
Serviço de Notificações - criação e resposta de notificações

Toda notificação do sistema passa por aqui: convites de evento,
receitas atribuídas, compartilhamento de notas/documentos/fotos/branding.
O envio em tempo real (WebSocket) é feito pelo signal post_save.
"""

import logging
from typing import Iterable, List, Optional

from django.contrib.auth import get_user_model

from apps.agenda.models import CompartilhamentoEvento
from apps.core.utils import ErroRequisicao, buscar_usuario, parse_lista_ids

from .models import Notificacao

logger = logging.getLogger(__name__)


class NotificacaoService:
    """
    Serviço encapsulado para notificações

    - criar_notificacao: cria uma notificação para um destinatário
    - compartilhar_recurso: notifica vários usuários sobre um recurso
    - responder_compartilhamento: aceita/recusa um convite de evento
    """

    ACOES_RESPOSTA = {
        'accept': CompartilhamentoEvento.STATUS_ACEITO,
        'decline': CompartilhamentoEvento.STATUS_RECUSADO,
    }

    def criar_notificacao(
        self,
        destinatario,
        titulo: str,
        mensagem: str,
        tipo: str = Notificacao.Tipo.GERAL,
        evento=None,
        compartilhamento=None,
        recurso: str = '',
        recurso_id: Optional[int] = None,
    ) -> Notificacao:
        """Cria uma notificação (o signal cuida do envio em tempo real)"""
        notificacao = Notificacao.objects.create(
            destinatario=destinatario,
            titulo=titulo,
            mensagem=mensagem,
            tipo=tipo,
            evento=evento,
            compartilhamento=compartilhamento,
            recurso=recurso,
            recurso_id=recurso_id,
        )

        logger.info(f"Notificação '{tipo}' criada para usuário {destinatario.id}")
        return notificacao

    def compartilhar_recurso(
        self,
        usuarios_ids: Iterable[int],
        remetente,
        tipo: str,
        recurso: str,
        recurso_id: int,
        titulo: str,
        mensagem: str,
    ) -> List[Notificacao]:
        """
        Notifica cada usuário alvo sobre um recurso compartilhado

        Todos os alvos precisam existir (404 caso contrário).
        O próprio remetente nunca é notificado.
        """
        destinatarios = self.carregar_usuarios(usuarios_ids)

        notificacoes = []
        for destinatario in destinatarios:
            if remetente is not None and destinatario.id == remetente.id:
                continue

            notificacoes.append(self.criar_notificacao(
                destinatario,
                titulo,
                mensagem,
                tipo=tipo,
                recurso=recurso,
                recurso_id=recurso_id,
            ))

        logger.info(f"{recurso} {recurso_id} compartilhado com {len(notificacoes)} usuário(s)")
        return notificacoes

    def responder_compartilhamento(self, notificacao: Notificacao, acao: str):
        """
        Aceita ou recusa o convite ligado à notificação

        A notificação é marcada como lida independentemente de o status
        do convite ter mudado: resposta repetida é aceita sem efeito e
        transição proibida gera TransicaoInvalida com a notificação já lida.

        Returns:
            O compartilhamento atualizado
        """
        novo_status = self.ACOES_RESPOSTA.get(acao)
        if novo_status is None:
            raise ErroRequisicao("action deve ser 'accept' ou 'decline'")

        compartilhamento = notificacao.compartilhamento
        if compartilhamento is None:
            raise ErroRequisicao('Notificação não possui convite para responder')

        try:
            alterado = compartilhamento.alterar_status(novo_status)
        finally:
            notificacao.marcar_como_lida()

        if alterado:
            logger.info(
                f"Convite {compartilhamento.id} do evento {compartilhamento.evento_id} "
                f"{novo_status} pelo usuário {compartilhamento.usuario_id}"
            )

        return compartilhamento

    def ler_pedido_compartilhamento(self, dados, dono):
        """
        Extrai userIds e o remetente de um pedido de compartilhamento

        Sem sharedBy, o remetente é o dono do recurso.
        """
        usuarios_ids = parse_lista_ids(dados.get('userIds'))

        remetente = dono
        if dados.get('sharedBy'):
            remetente = buscar_usuario(dados['sharedBy'], 'sharedBy')

        return usuarios_ids, remetente

    def carregar_usuarios(self, usuarios_ids: Iterable[int]):
        """Carrega os usuários na ordem pedida (404 se algum não existir)"""
        ids = list(usuarios_ids)
        Usuario = get_user_model()
        usuarios = {usuario.id: usuario for usuario in Usuario.objects.filter(id__in=ids)}

        faltando = [str(usuario_id) for usuario_id in ids if usuario_id not in usuarios]
        if faltando:
            raise ErroRequisicao(f"Usuário(s) não encontrado(s): {', '.join(faltando)}", status=404)

        return [usuarios[usuario_id] for usuario_id in ids]


# Instância global do serviço
notificacao_service = NotificacaoService()
