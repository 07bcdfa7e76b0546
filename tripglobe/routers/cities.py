from fastapi import APIRouter, Depends, Query

from tripglobe.services.wiki_service import WikipediaService, get_wikipedia_service

router = APIRouter(tags=["cities"])


@router.get("/cities")
def city_summary(
    name: str = Query(..., min_length=1),
    wiki: WikipediaService = Depends(get_wikipedia_service)
):
    """Wikipedia summary for a city; lookup failures come back as {"error": ...}"""
    return wiki.get_summary(name)
