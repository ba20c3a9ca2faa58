# apps/conteudo/views.py

import logging

from apps.core.permissions import UnkPermissions, exigir_permissao
from apps.core.utils import (
    ErroRequisicao,
    api_view,
    buscar_ou_404,
    buscar_usuario,
    campos_obrigatorios,
    json_resposta,
    ler_json,
    parse_data_hora,
    parse_id,
    validar_escolha,
)
from apps.notificacoes.models import Notificacao
from apps.notificacoes.services import notificacao_service
from apps.projetos.models import Projeto

from .models import Branding, FotoInstagram

logger = logging.getLogger(__name__)


# =================== FOTOS DO INSTAGRAM ===================

def _aplicar_dados_foto(foto, dados):
    if 'title' in dados:
        foto.titulo = dados['title']
    if 'description' in dados:
        foto.descricao = dados['description'] or ''
    if 'fileName' in dados:
        foto.nome_arquivo = dados['fileName']
    if 'fileUrl' in dados:
        foto.url_arquivo = dados['fileUrl']
    if 'fileSize' in dados:
        foto.tamanho_arquivo = parse_id(dados['fileSize'], 'fileSize', obrigatorio=False) or 0
    if 'folder' in dados:
        foto.pasta = dados['folder']
    if 'status' in dados:
        foto.status = validar_escolha(dados['status'], FotoInstagram.STATUS_CHOICES, 'status')
    if 'scheduledDate' in dados:
        foto.agendada_para = parse_data_hora(dados['scheduledDate'], 'scheduledDate')
    if 'postedDate' in dados:
        foto.publicada_em = parse_data_hora(dados['postedDate'], 'postedDate')
    if 'projectId' in dados:
        projeto_id = parse_id(dados['projectId'], 'projectId', obrigatorio=False)
        foto.projeto = buscar_ou_404(Projeto, 'Projeto não encontrado', id=projeto_id) if projeto_id else None


@api_view(['GET', 'POST'])
def fotos_view(request):
    """
    GET: fotos de userId (filtros projectId, folder e status)
    POST: registra foto
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        fotos = FotoInstagram.objects.filter(usuario_id=usuario_id).select_related('projeto')

        projeto_id = parse_id(request.GET.get('projectId'), 'projectId', obrigatorio=False)
        if projeto_id:
            fotos = fotos.filter(projeto_id=projeto_id)

        pasta = request.GET.get('folder')
        if pasta:
            fotos = fotos.filter(pasta=pasta)

        status = request.GET.get('status')
        if status:
            fotos = fotos.filter(status=validar_escolha(status, FotoInstagram.STATUS_CHOICES, 'status'))

        return json_resposta([f.para_dict() for f in fotos])

    dados = ler_json(request)
    campos_obrigatorios(
        dados, 'title', 'fileName', 'fileUrl', 'folder', 'userId',
        mensagem='Campos obrigatórios não fornecidos'
    )

    foto = FotoInstagram(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_foto(foto, dados)
    foto.save()

    return json_resposta(foto.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def foto_detalhe_view(request, foto_id):
    foto = buscar_ou_404(
        FotoInstagram.objects.select_related('projeto'),
        'Foto não encontrada',
        id=foto_id,
    )

    if request.method == 'GET':
        return json_resposta(foto.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_foto(foto, ler_json(request))
        foto.save()
        return json_resposta(foto.para_dict())

    foto.delete()
    return json_resposta({'message': 'Foto excluída com sucesso'})


@api_view(['POST'])
def compartilhar_foto_view(request, foto_id):
    foto = buscar_ou_404(FotoInstagram.objects.select_related('usuario'), 'Foto não encontrada', id=foto_id)
    usuarios_ids, remetente = notificacao_service.ler_pedido_compartilhamento(ler_json(request), foto.usuario)

    notificacoes = notificacao_service.compartilhar_recurso(
        usuarios_ids,
        remetente,
        tipo=Notificacao.Tipo.FOTO_COMPARTILHADA,
        recurso='instagram_photo',
        recurso_id=foto.id,
        titulo='Foto do Instagram compartilhada',
        mensagem=f"{remetente.nome_exibicao} compartilhou a foto \"{foto.titulo}\" com você",
    )

    return json_resposta({
        'message': 'Foto compartilhada com sucesso',
        'notifications': [n.para_dict() for n in notificacoes],
    }, status=201)


# =================== BRANDING ===================

CAMPOS_BRANDING = {
    'mission': 'missao',
    'vision': 'visao',
    'values': 'valores',
    'voiceTone': 'tom_voz',
    'characteristics': 'caracteristicas',
    'targetAudience': 'publico_alvo',
}


def _brandings():
    return Branding.objects.select_related('usuario', 'criado_por')


def _aplicar_dados_branding(branding, dados):
    for chave, campo in CAMPOS_BRANDING.items():
        if chave in dados:
            setattr(branding, campo, dados[chave] or '')


@api_view(['GET', 'POST'])
def brandings_view(request):
    """
    GET: brandings filtrados por createdBy e/ou userId
    POST: cria o branding de um usuário (um por usuário)
    """
    if request.method == 'GET':
        brandings = _brandings()

        criado_por = parse_id(request.GET.get('createdBy'), 'createdBy', obrigatorio=False)
        if criado_por:
            brandings = brandings.filter(criado_por_id=criado_por)

        usuario_id = parse_id(request.GET.get('userId'), 'userId', obrigatorio=False)
        if usuario_id:
            brandings = brandings.filter(usuario_id=usuario_id)

        return json_resposta([b.para_dict() for b in brandings])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'userId', 'createdBy', mensagem='userId e createdBy são obrigatórios')

    dono = buscar_usuario(dados['userId'])
    criador = buscar_usuario(dados['createdBy'], 'createdBy')

    exigir_permissao(
        UnkPermissions.pode_criar_branding_para(criador, dono),
        'Apenas administradores podem criar branding para outros usuários'
    )

    if Branding.objects.filter(usuario=dono).exists():
        raise ErroRequisicao('Já existe um branding para este usuário', status=409)

    branding = Branding(usuario=dono, criado_por=criador)
    _aplicar_dados_branding(branding, dados)
    branding.save()

    if criador.id != dono.id:
        notificacao_service.criar_notificacao(
            dono,
            'Novo branding criado',
            f"{criador.nome_exibicao} criou um branding personalizado para você",
            tipo=Notificacao.Tipo.BRANDING_CRIADO,
            recurso='branding',
            recurso_id=branding.id,
        )

    logger.info(f"Branding {branding.id} criado para usuário {dono.id} por {criador.id}")
    return json_resposta(branding.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def branding_detalhe_view(request, branding_id):
    branding = buscar_ou_404(_brandings(), 'Branding não encontrado', id=branding_id)

    if request.method == 'GET':
        return json_resposta(branding.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_branding(branding, ler_json(request))
        branding.save()
        return json_resposta(branding.para_dict())

    branding.delete()
    return json_resposta({'message': 'Branding excluído com sucesso'})


@api_view(['GET'])
def branding_usuario_view(request, usuario_id):
    branding = buscar_ou_404(_brandings(), 'Branding não encontrado', usuario_id=usuario_id)
    return json_resposta(branding.para_dict())


@api_view(['POST'])
def compartilhar_branding_view(request, branding_id):
    branding = buscar_ou_404(_brandings(), 'Branding não encontrado', id=branding_id)
    usuarios_ids, remetente = notificacao_service.ler_pedido_compartilhamento(ler_json(request), branding.usuario)

    notificacoes = notificacao_service.compartilhar_recurso(
        usuarios_ids,
        remetente,
        tipo=Notificacao.Tipo.BRANDING_COMPARTILHADO,
        recurso='branding',
        recurso_id=branding.id,
        titulo='Branding compartilhado',
        mensagem=f"{remetente.nome_exibicao} compartilhou o branding de {branding.usuario.nome_exibicao} com você",
    )

    return json_resposta({
        'message': 'Branding compartilhado com sucesso',
        'notifications': [n.para_dict() for n in notificacoes],
    }, status=201)
