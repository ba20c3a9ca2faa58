# apps/projetos/views.py

import logging

from django.db.models import Prefetch

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

from .models import Documento, Projeto, Tarefa

logger = logging.getLogger(__name__)


def _projetos_com_relacionados():
    """Prefetch das tarefas e documentos para evitar N+1 queries"""
    return Projeto.objects.prefetch_related(
        Prefetch('tarefas', queryset=Tarefa.objects.order_by('concluida', 'id')),
        Prefetch('documentos', queryset=Documento.objects.order_by('-criado_em')),
    )


# =================== PROJETOS ===================

def _aplicar_dados_projeto(projeto, dados):
    if 'title' in dados:
        if not dados['title']:
            raise ErroRequisicao('title não pode ser vazio')
        projeto.titulo = dados['title']
    if 'description' in dados:
        projeto.descricao = dados['description'] or ''
    if 'category' in dados:
        projeto.categoria = validar_escolha(dados['category'], Projeto.CATEGORIA_CHOICES, 'category')
    if 'status' in dados:
        projeto.status = validar_escolha(dados['status'], Projeto.STATUS_CHOICES, 'status')
    if 'progress' in dados:
        progresso = parse_id(dados['progress'], 'progress')
        if not 0 <= progresso <= 100:
            raise ErroRequisicao('progress deve estar entre 0 e 100')
        projeto.progresso = progresso
    if 'deadline' in dados:
        projeto.prazo = parse_data_valor(dados['deadline'], 'deadline')


@api_view(['GET', 'POST'])
def projetos_view(request):
    """
    GET: projetos de userId com tarefas e documentos
    POST: cria projeto
    """
    if request.method == 'GET':
        usuario = buscar_usuario(request.GET.get('userId'))
        projetos = _projetos_com_relacionados().filter(usuario=usuario)

        status = request.GET.get('status')
        if status:
            projetos = projetos.filter(status=validar_escolha(status, Projeto.STATUS_CHOICES, 'status'))

        return json_resposta([p.para_dict(incluir_relacionados=True) for p in projetos])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'title', 'userId', mensagem='title e userId são obrigatórios')

    projeto = Projeto(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_projeto(projeto, dados)
    projeto.save()

    logger.info(f"Projeto {projeto.id} criado para usuário {projeto.usuario_id}")
    return json_resposta(projeto.para_dict(incluir_relacionados=True), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def projeto_detalhe_view(request, projeto_id):
    projeto = buscar_ou_404(_projetos_com_relacionados(), 'Projeto não encontrado', id=projeto_id)

    if request.method == 'GET':
        return json_resposta(projeto.para_dict(incluir_relacionados=True))

    if request.method == 'PUT':
        _aplicar_dados_projeto(projeto, ler_json(request))
        projeto.save()
        return json_resposta(projeto.para_dict(incluir_relacionados=True))

    # Tarefas e documentos do projeto são removidos em cascata
    total, detalhes = projeto.delete()
    logger.info(f"Projeto {projeto_id} excluído ({total} registros): {detalhes}")
    return json_resposta({'message': 'Projeto excluído com sucesso'})


# =================== TAREFAS ===================

def _aplicar_dados_tarefa(tarefa, dados):
    if 'title' in dados:
        if not dados['title']:
            raise ErroRequisicao('title não pode ser vazio')
        tarefa.titulo = dados['title']
    if 'description' in dados:
        tarefa.descricao = dados['description'] or ''
    if 'completed' in dados:
        tarefa.concluida = bool(parse_bool(dados['completed']))
    if 'priority' in dados:
        tarefa.prioridade = validar_escolha(dados['priority'], Tarefa.PRIORIDADE_CHOICES, 'priority')
    if 'dueDate' in dados:
        tarefa.data_limite = parse_data_valor(dados['dueDate'], 'dueDate')


@api_view(['GET', 'POST'])
def tarefas_view(request):
    if request.method == 'GET':
        projeto_id = parse_id(request.GET.get('projectId'), 'projectId')
        tarefas = Tarefa.objects.filter(projeto_id=projeto_id)
        return json_resposta([t.para_dict() for t in tarefas])

    dados = ler_json(request)
    campos_obrigatorios(dados, 'title', 'projectId', mensagem='title e projectId são obrigatórios')

    projeto = buscar_ou_404(Projeto, 'Projeto não encontrado', id=parse_id(dados['projectId'], 'projectId'))
    tarefa = Tarefa(projeto=projeto)
    _aplicar_dados_tarefa(tarefa, dados)
    tarefa.save()

    return json_resposta(tarefa.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def tarefa_detalhe_view(request, tarefa_id):
    tarefa = buscar_ou_404(Tarefa, 'Tarefa não encontrada', id=tarefa_id)

    if request.method == 'GET':
        return json_resposta(tarefa.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_tarefa(tarefa, ler_json(request))
        tarefa.save()
        return json_resposta(tarefa.para_dict())

    tarefa.delete()
    return json_resposta({'message': 'Tarefa excluída com sucesso'})


# =================== DOCUMENTOS ===================

def _aplicar_dados_documento(documento, dados):
    if 'title' in dados:
        documento.titulo = dados['title']
    if 'description' in dados:
        documento.descricao = dados['description'] or ''
    if 'fileName' in dados:
        documento.nome_arquivo = dados['fileName']
    if 'fileUrl' in dados:
        documento.url_arquivo = dados['fileUrl']
    if 'fileType' in dados:
        documento.tipo_arquivo = validar_escolha(dados['fileType'], Documento.TIPO_ARQUIVO_CHOICES, 'fileType')
    if 'fileSize' in dados:
        documento.tamanho_arquivo = parse_id(dados['fileSize'], 'fileSize', obrigatorio=False) or 0
    if 'category' in dados:
        documento.categoria = validar_escolha(dados['category'], Documento.CATEGORIA_CHOICES, 'category')
    if 'projectId' in dados:
        projeto_id = parse_id(dados['projectId'], 'projectId', obrigatorio=False)
        documento.projeto = (
            buscar_ou_404(Projeto, 'Projeto não encontrado', id=projeto_id) if projeto_id else None
        )


@api_view(['GET', 'POST'])
def documentos_view(request):
    """
    GET: documentos de userId (filtros projectId e category)
    POST: registra documento
    """
    if request.method == 'GET':
        usuario_id = parse_id(request.GET.get('userId'), 'userId')
        documentos = Documento.objects.filter(usuario_id=usuario_id)

        projeto_id = parse_id(request.GET.get('projectId'), 'projectId', obrigatorio=False)
        if projeto_id:
            documentos = documentos.filter(projeto_id=projeto_id)

        categoria = request.GET.get('category')
        if categoria:
            documentos = documentos.filter(
                categoria=validar_escolha(categoria, Documento.CATEGORIA_CHOICES, 'category')
            )

        return json_resposta([d.para_dict() for d in documentos])

    dados = ler_json(request)
    campos_obrigatorios(
        dados, 'title', 'fileName', 'fileUrl', 'userId',
        mensagem='title, fileName, fileUrl e userId são obrigatórios'
    )

    documento = Documento(usuario=buscar_usuario(dados['userId']))
    _aplicar_dados_documento(documento, dados)
    documento.save()

    return json_resposta(documento.para_dict(), status=201)


@api_view(['GET', 'PUT', 'DELETE'])
def documento_detalhe_view(request, documento_id):
    documento = buscar_ou_404(Documento, 'Documento não encontrado', id=documento_id)

    if request.method == 'GET':
        return json_resposta(documento.para_dict())

    if request.method == 'PUT':
        _aplicar_dados_documento(documento, ler_json(request))
        documento.save()
        return json_resposta(documento.para_dict())

    documento.delete()
    return json_resposta({'message': 'Documento excluído com sucesso'})


@api_view(['POST'])
def compartilhar_documento_view(request, documento_id):
    """Notifica os usuários escolhidos sobre o documento"""
    documento = buscar_ou_404(
        Documento.objects.select_related('usuario'),
        'Documento não encontrado',
        id=documento_id,
    )
    usuarios_ids, remetente = notificacao_service.ler_pedido_compartilhamento(
        ler_json(request), documento.usuario
    )

    notificacoes = notificacao_service.compartilhar_recurso(
        usuarios_ids,
        remetente,
        tipo=Notificacao.Tipo.DOCUMENTO_COMPARTILHADO,
        recurso='document',
        recurso_id=documento.id,
        titulo='Documento compartilhado',
        mensagem=f"{remetente.nome_exibicao} compartilhou o documento \"{documento.titulo}\" com você",
    )

    return json_resposta({
        'message': 'Documento compartilhado com sucesso',
        'notifications': [n.para_dict() for n in notificacoes],
    }, status=201)
