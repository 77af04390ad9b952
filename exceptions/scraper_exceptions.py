"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""


# Exceção base para erros de scraper
class ScraperError(Exception):
    pass


# Scraper não encontrado no registro
class ScraperNotFoundError(ScraperError):
    def __init__(self, scraper_type: str, available: list):
        self.scraper_type = scraper_type
        self.available = available
        super().__init__(f"Scraper '{scraper_type}' não encontrado. Disponíveis: {available}")


# Erro de configuração do scraper
class ScraperConfigurationError(ScraperError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# Operação obrigatória ausente no scraper (ex: category_url)
class OperationNotImplementedError(ScraperConfigurationError):
    def __init__(self, scraper_type: str, operation: str, argument: object = None):
        self.scraper_type = scraper_type
        self.operation = operation
        self.argument = argument
        message = f"{operation} não implementado em '{scraper_type}'"
        if argument is not None:
            message += f" para {argument}"
        super().__init__(message)


# Argumento com formato inesperado para a operação chamada
class InvalidArgumentError(ScraperError):
    def __init__(self, operation: str, expected: str, received: object):
        self.operation = operation
        self.expected = expected
        self.received = received
        super().__init__(
            f"Argumento inválido para {operation}: esperado {expected}, recebido {type(received).__name__}"
        )
