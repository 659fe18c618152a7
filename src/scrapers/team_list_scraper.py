# src/scrapers/team_list_scraper.py

from typing import List, Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from src.config.settings import settings
from .base_scraper import BaseScraper, ScraperError

# First column of every body row in the event's team table
TEAM_CELL_SELECTOR = "#data-table > tbody > tr > td:first-of-type"


def parse_team_list(html: str) -> List[str]:
    """Extracts team numbers from the event page's team table.

    Each cell's text is split on newlines; lines are stripped and blank
    lines dropped, so one cell may contribute several teams.
    """
    soup = BeautifulSoup(html, "html.parser")
    cells = soup.select(TEAM_CELL_SELECTOR)
    if not cells:
        logger.warning(f"No cells matched '{TEAM_CELL_SELECTOR}' on the team page")

    teams: List[str] = []
    for cell in cells:
        for line in cell.get_text().split("\n"):
            team = line.strip()
            if team:
                teams.append(team)
    return teams


class TeamListScraper(BaseScraper):
    """Scrapes the list of registered teams from a RobotEvents event page."""

    source_name = "RobotEvents"

    def __init__(
        self, client: Optional[httpx.AsyncClient] = None, url: Optional[str] = None
    ):
        super().__init__(client)
        self.url = url or settings.teams_page_url

    async def fetch_teams(self) -> List[str]:
        logger.info(f"Fetching team list from {self.url}")
        response = await self._make_request(method="GET", url=self.url)
        try:
            teams = parse_team_list(response.text)
        except Exception as e:
            logger.exception(f"Failed to parse team list page {self.url}: {e}")
            raise ScraperError(f"Could not parse team list from {self.url}") from e
        logger.info(f"Found {len(teams)} teams on {self.url}")
        return teams
