# apps/relatorios/views.py

import csv
import logging
from datetime import datetime
from io import BytesIO

from django.conf import settings
from django.http import HttpResponse
from django.utils.html import escape
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
import xlsxwriter

from apps.core.models import ConfiguracaoEmpresa
from apps.core.utils import api_view, buscar_usuario, json_resposta, valor_monetario

from .utils import (
    CABECALHO_EXTRATO,
    gerar_relatorio_financeiro,
    linha_extrato,
    linhas_resumo,
    nome_arquivo,
)

logger = logging.getLogger(__name__)


def _moeda(valor):
    return f"R$ {valor:,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')


@api_view(['GET'])
def relatorio_financeiro_view(request):
    """
    Totais financeiros do usuário em JSON
    Inclui a quebra por categoria e a quantidade de transações
    """
    usuario = buscar_usuario(request.GET.get('userId'))
    relatorio = gerar_relatorio_financeiro(usuario)

    dados = dict(relatorio['resumo'])
    dados['transactionCount'] = len(relatorio['transacoes'])
    dados['byCategory'] = [
        {
            'category': categoria,
            'income': valor_monetario(totais['income']),
            'expenses': valor_monetario(totais['expense']),
        }
        for categoria, totais in relatorio['categorias'].items()
    ]

    return json_resposta(dados)


@api_view(['GET'])
def exportar_financeiro_csv(request):
    """
    Exporta o extrato do usuário para CSV
    """
    usuario = buscar_usuario(request.GET.get('userId'))
    relatorio = gerar_relatorio_financeiro(usuario)

    # Criar response HTTP para CSV
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo(usuario, "csv")}"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow(CABECALHO_EXTRATO)

    for transacao in relatorio['transacoes']:
        linha = linha_extrato(transacao)
        linha[0] = linha[0].strftime('%d/%m/%Y')
        linha[4] = f"{linha[4]:.2f}"
        writer.writerow(linha)

    # Totais
    writer.writerow([])
    for rotulo, valor in linhas_resumo(relatorio['resumo']):
        writer.writerow([rotulo, f"{valor:.2f}"])

    logger.info(f"Extrato CSV gerado para usuário {usuario.id}")
    return response


@api_view(['GET'])
def exportar_financeiro_excel(request):
    """
    Exporta o relatório financeiro para Excel (XLSX)
    Abas: Resumo, Transações e Categorias
    """
    usuario = buscar_usuario(request.GET.get('userId'))
    relatorio = gerar_relatorio_financeiro(usuario)

    # Criar arquivo Excel em memória
    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    # Formatos
    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    date_format = workbook.add_format({'num_format': 'dd/mm/yyyy', 'border': 1})
    money_format = workbook.add_format({'num_format': '#,##0.00', 'border': 1})

    # Aba 1: Resumo
    resumo_sheet = workbook.add_worksheet('Resumo')
    resumo_sheet.write('A1', 'RELATÓRIO FINANCEIRO', header_format)
    resumo_sheet.write('A3', 'Usuário:', header_format)
    resumo_sheet.write('B3', usuario.nome_exibicao, cell_format)
    resumo_sheet.write('A4', 'Gerado em:', header_format)
    resumo_sheet.write('B4', datetime.now().strftime('%d/%m/%Y %H:%M'), cell_format)

    for row, (rotulo, valor) in enumerate(linhas_resumo(relatorio['resumo']), 5):
        resumo_sheet.write(row, 0, rotulo, header_format)
        resumo_sheet.write(row, 1, valor, money_format)

    # Aba 2: Transações
    transacoes_sheet = workbook.add_worksheet('Transações')
    for col, header in enumerate(CABECALHO_EXTRATO):
        transacoes_sheet.write(0, col, header, header_format)

    for row, transacao in enumerate(relatorio['transacoes'], 1):
        linha = linha_extrato(transacao)
        transacoes_sheet.write(row, 0, linha[0], date_format)
        for col in (1, 2, 3, 5, 6):
            transacoes_sheet.write(row, col, linha[col], cell_format)
        transacoes_sheet.write(row, 4, float(linha[4]), money_format)

    # Aba 3: Categorias
    categorias_sheet = workbook.add_worksheet('Categorias')
    for col, header in enumerate(['Categoria', 'Receitas', 'Despesas']):
        categorias_sheet.write(0, col, header, header_format)

    for row, (categoria, totais) in enumerate(relatorio['categorias'].items(), 1):
        categorias_sheet.write(row, 0, categoria, cell_format)
        categorias_sheet.write(row, 1, float(totais['income']), money_format)
        categorias_sheet.write(row, 2, float(totais['expense']), money_format)

    # Ajustar largura das colunas
    for sheet in [resumo_sheet, transacoes_sheet, categorias_sheet]:
        sheet.set_column('A:G', 18)

    # Fechar workbook e preparar response
    workbook.close()
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo(usuario, "xlsx")}"'

    logger.info(f"Relatório Excel gerado para usuário {usuario.id}")
    return response


@api_view(['GET'])
def relatorio_financeiro_pdf(request):
    """
    Gera o extrato financeiro do usuário em PDF
    """
    usuario = buscar_usuario(request.GET.get('userId'))
    relatorio = gerar_relatorio_financeiro(usuario)
    empresa = ConfiguracaoEmpresa.atual()

    # Criar response HTTP para PDF
    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo(usuario, "pdf")}"'

    doc = SimpleDocTemplate(response, pagesize=A4)
    story = []

    # Estilos
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=30,
        textColor=colors.darkblue
    )
    heading_style = ParagraphStyle(
        'CustomHeading',
        parent=styles['Heading2'],
        fontSize=14,
        spaceAfter=12,
        textColor=colors.darkblue
    )

    story.append(Paragraph(f"Relatório Financeiro: {escape(usuario.nome_exibicao)}", title_style))
    story.append(Paragraph(escape(empresa.nome if empresa else settings.UNK_NOME_EMPRESA_PADRAO), styles['Normal']))
    story.append(Paragraph(f"Gerado em: {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles['Normal']))
    story.append(Spacer(1, 20))

    # Totais
    story.append(Paragraph("Resumo", heading_style))

    resumo_data = [['Item', 'Valor']]
    resumo_data += [[rotulo, _moeda(valor)] for rotulo, valor in linhas_resumo(relatorio['resumo'])]

    resumo_table = Table(resumo_data)
    resumo_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 12),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
        ('BACKGROUND', (0, 1), (-1, -1), colors.beige),
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
        ('GRID', (0, 0), (-1, -1), 1, colors.black)
    ]))

    story.append(resumo_table)
    story.append(Spacer(1, 20))

    # Extrato
    story.append(Paragraph("Transações", heading_style))

    if relatorio['transacoes']:
        extrato_data = [['Data', 'Tipo', 'Descrição', 'Categoria', 'Valor']]
        for transacao in relatorio['transacoes']:
            linha = linha_extrato(transacao)
            extrato_data.append([
                linha[0].strftime('%d/%m/%Y'),
                linha[1],
                linha[2][:40],
                linha[3],
                _moeda(linha[4]),
            ])

        extrato_table = Table(extrato_data, repeatRows=1)
        extrato_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.darkblue),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('ALIGN', (-1, 1), (-1, -1), 'RIGHT'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.lightgrey]),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black)
        ]))
        story.append(extrato_table)
    else:
        story.append(Paragraph("Nenhuma transação registrada.", styles['Normal']))

    doc.build(story)

    logger.info(f"Relatório PDF gerado para usuário {usuario.id}")
    return response
