# roster_report/main.py
"""Консольный интерфейс: выбор xlsx-файла, запуск обработки, открытие отчета."""
import logging
import os
import subprocess
import sys
import traceback

from . import pipeline

logger = logging.getLogger(__name__)


def reveal_file(path: str):
    """Открывает отчет программой по умолчанию, не дожидаясь ее завершения."""
    try:
        if sys.platform.startswith("win"):
            os.startfile(path)
        elif sys.platform == "darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])
    except OSError as e:
        logger.warning(f"Не удалось открыть отчет {path}: {e}")


def print_banner():
    print("\n" + "="*30)
    print("   АНАЛИЗ УСПЕВАЕМОСТИ")
    print("="*30)
    print("Укажите путь к xlsx-файлу со списком студентов.")
    print("0 или пустая строка - выход.")


def main_cli(open_result: bool = True):
    """Основной цикл: один файл за раз, до выхода пользователя."""
    print_banner()

    while True:
        filepath = input("\nПуть к файлу (*.xlsx): ").strip().strip('"').strip("'")
        if filepath in ("", "0"):
            print("👋 До свидания!")
            break

        try:
            result = pipeline.run_pipeline(filepath, logger)
        except Exception as e:
            logger.exception("Произошла непредвиденная ошибка")
            print(f"❌ Произошла непредвиденная ошибка: {e}")
            continue

        if result.ok:
            print(f"✅ Отчет сохранен: {result.output_path}")
            if open_result:
                reveal_file(result.output_path)
        else:
            print(f"❌ {result.message}")


def run():
    """Точка входа консольной команды."""
    logging.basicConfig(level=logging.INFO)
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()


if __name__ == '__main__':
    run()
