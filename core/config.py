import os
from dotenv import load_dotenv

# Carrega as variáveis do arquivo .env
load_dotenv()


class Config:
    # --- LOGS ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # --- TABELA DE BANCOS ---
    # Caminho opcional para um JSON {"codigo": "nome"} que substitui a tabela padrão
    BANCOS_PATH = os.getenv("BANCOS_PATH") or None

    # --- PDF ---
    PDF_TAMANHO_MAXIMO = int(os.getenv("PDF_TAMANHO_MAXIMO", str(10 * 1024 * 1024)))
    # Senha para PDFs protegidos (ex: faturas que usam o CPF como senha)
    PDF_SENHA = os.getenv("PDF_SENHA") or None
