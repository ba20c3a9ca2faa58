# apps/core/permissions.py

from .utils import ErroRequisicao


class UnkPermissions:
    """
    Regras de permissão da Conexão UNK
    Baseadas nos tipos de usuário: admin e dj

    O cliente informa qual usuário está agindo (userId, sharedBy,
    createdBy); as regras recebem os usuários já carregados.
    """

    @staticmethod
    def is_admin(usuario):
        """Verifica se é administrador"""
        return usuario is not None and usuario.tipo == 'admin'

    @staticmethod
    def is_dj(usuario):
        """Verifica se é DJ"""
        return usuario is not None and usuario.tipo == 'dj'

    @staticmethod
    def pode_atribuir_transacao(criador):
        """Somente administradores atribuem receitas a DJs"""
        return UnkPermissions.is_admin(criador)

    @staticmethod
    def pode_receber_atribuicao(destinatario):
        """Atribuições só podem ter DJs como destino"""
        return UnkPermissions.is_dj(destinatario)

    @staticmethod
    def pode_criar_branding_para(criador, dono):
        """
        Qualquer usuário cria o próprio branding;
        apenas administradores criam para outros usuários
        """
        if criador is None or dono is None:
            return False

        if criador.id == dono.id:
            return True

        return UnkPermissions.is_admin(criador)

    @staticmethod
    def pode_responder_notificacao(usuario, notificacao):
        """Somente o destinatário responde a uma notificação"""
        return usuario is not None and notificacao.destinatario_id == usuario.id


def exigir_permissao(permitido, mensagem='Você não tem permissão para esta ação.'):
    """Interrompe a requisição com 403 quando a regra não é satisfeita"""
    if not permitido:
        raise ErroRequisicao(mensagem, status=403)
