from bs4 import BeautifulSoup


class HtmlDocument:
    """Разобранный HTML-документ, к которому можно применять CSS-селекторы.

    Пример использования:
        doc = HtmlDocument(b'<html><body><div id="x"></div></body></html>')
        doc.query('div#x')  # -> 1
    """

    def __init__(self, markup, features='html.parser'):
        self._soup = BeautifulSoup(markup, features)

    def query(self, selector):
        """Возвращает количество узлов, подходящих под `selector`.

        Некорректный селектор приводит к `soupsieve.SelectorSyntaxError`.
        """
        return len(self._soup.select(selector))
