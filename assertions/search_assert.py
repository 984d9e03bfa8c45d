from decimal import Decimal


class SearchAssert:

    @staticmethod
    def has_results(count: int):
        assert count > 0, "搜索结果为空"

    @staticmethod
    def title_mentions_term(title: str, term: str):
        expect = f"search results for: '{term.lower()}'"
        assert expect in title.lower(), f"搜索结果标题{title!r}中不包含：{expect}"

    @staticmethod
    def any_title_contains(titles: list[str], term: str):
        assert any(term.lower() in t.lower() for t in titles), f"没有任何商品名称包含{term!r}：{titles}"

    @staticmethod
    def count_not_increased(before: int, after: int):
        assert after <= before, f"筛选后商品数量{after}大于筛选前{before}"

    @staticmethod
    def prices_in_range(prices: list[Decimal], low: Decimal, high: Decimal):
        for price in prices:
            assert low <= price <= high, f"商品价格{price}不在{low}~{high}范围内"

    @staticmethod
    def sort_asc(values: list):
        assert values == sorted(values), f"未正序排列：{values}"
