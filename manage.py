#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Conexão UNK - Gestão de artistas e DJs
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Testes usam SQLite em memória; o resto usa desenvolvimento por padrão
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.test')
    else:
        os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import call_command, execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Atalhos da Conexão UNK
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # Setup inicial: migrações + usuários e dados demo
        if command == 'setup':
            import django
            django.setup()

            print("🚀 Configurando Conexão UNK...")
            print("📊 Aplicando migrações...")
            call_command('migrate', interactive=False)

            print("🌱 Populando banco com dados demo...")
            call_command('seed')
            print("✅ Setup concluído!")
            return

        # Criação do banco PostgreSQL local
        elif command == 'setup-db':
            print("🐘 Configurando PostgreSQL...")

            commands = [
                "CREATE USER unk_user WITH PASSWORD 'unk123';",
                "CREATE DATABASE conexao_unk OWNER unk_user;",
                "GRANT ALL PRIVILEGES ON DATABASE conexao_unk TO unk_user;",
                "ALTER USER unk_user CREATEDB;"
            ]

            for cmd in commands:
                print(f"Executando: {cmd}")
                if os.system(f'psql -U postgres -h localhost -c "{cmd}"') != 0:
                    print("⚠️  Comando pode ter falhado (normal se já existir)")

            print("📊 Execute agora: python manage.py setup")
            return

        elif command == 'backup':
            import django
            from datetime import datetime
            django.setup()

            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            backup_file = f"backup_unk_{timestamp}.json"
            print("💾 Criando backup do banco...")
            call_command('dumpdata', indent=2, output=backup_file, exclude=['contenttypes', 'auth.permission'])
            print(f"✅ Backup criado: {backup_file}")
            return

        # Apaga os dados e recria o ambiente demo
        elif command == 'reset':
            confirm = input("⚠️  Isso irá apagar TODOS os dados. Continuar? (y/N): ")
            if confirm.lower() == 'y':
                import django
                django.setup()

                print("🗑️  Resetando banco de dados...")
                call_command('flush', interactive=False)
                call_command('migrate', interactive=False)
                call_command('seed')
                print("✅ Reset concluído!")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
