"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""


# Exceção base para erros de download
class FetcherError(Exception):
    pass


# Falha ao baixar ou normalizar uma página
class FetchError(FetcherError):
    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Erro ao baixar {url}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


# Charset detectado com confiança insuficiente
class LowConfidenceEncodingError(FetchError):
    def __init__(self, url: str, encoding: str, confidence: float):
        self.encoding = encoding
        self.confidence = confidence
        super().__init__(url, f"confiança baixa para {encoding}: {confidence}")
