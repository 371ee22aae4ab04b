"""Collects the vacancies posted on https://jobs.ca.gov/ for a few job titles.

Each job title gets an HTML file with one table row per vacancy, followed by the vacancy's
description. The files are written into a directory named after today's date (e.g. ``10-28``).

.. code-block:: bash

    WEBUI_HEADLESS=0 python ca_state_jobs_search.py
"""

import logging
from datetime import date
from pathlib import Path

from html_writer import SimpleHtmlWriter

from webui import BaseApp
from webui import BasePage
from webui import Browser
from webui import Settings
from webui.elements import Button
from webui.elements import CheckBox
from webui.elements import ContainerElement
from webui.elements import Table
from webui.elements import Text
from webui.elements import TextField
from webui.elements import TextLink
from webui.exceptions import NoSuchElementException
from webui.exceptions import TimeoutException
from webui.exceptions import WebUIException

JOB_TITLES = [
    "SYSTEMS SOFTWARE SPECIALIST I (TECHNICAL)",
    "STAFF INFORMATION SYSTEMS ANALYST (SPECIALIST)",
]

COLUMNS = ["Control #", "Title", "Salary", "Type", "Department & Location", "Posted", "Deadline"]

logger = logging.getLogger("jobsearch")


class CaStateJobsSearchApp(BaseApp):
    def __init__(self, browser):
        super().__init__(browser, "https://jobs.ca.gov/")


class JobSearchPage(BasePage):
    job_title = TextField(id="cphMainContent_JobSearch_keyword")
    title_search_only = CheckBox(id="cphMainContent_JobSearch_cbTitleSearch")
    search_button = Button("#cphMainContent_JobSearch_ibtnSearch3")

    def __init__(self, browser, **kwargs):
        super().__init__(browser, **kwargs)
        self.set_key_element(self.job_title)

    def search(self, job_title, title_search_only=True):
        self.job_title.set_text(job_title)
        if title_search_only:
            self.title_search_only.check()
        self.search_button.click()
        return ExamsAndJobVacanciesSearchResultsPage(self.browser).wait_until_available()


class ExamsAndJobVacanciesSearchResultsPage(BasePage):
    """Occupation categories found for the searched title, each with a vacancies link."""

    KEY_LOCATOR = "#cphMainContent_OccGrid"

    table = Table("#cphMainContent_OccGrid")

    def collect(self, writer):
        row_count = self.table.row_count
        logger.info("The search results list %d rows", row_count)
        for row_index in range(row_count):
            link = TextLink(self.browser, f"#cphMainContent_OccGrid_lbVacacnyCount_{row_index}")
            if not link.exists(timeout=0):
                continue
            logger.info(
                "Opening the %r vacancies on row %d",
                self.table.cell_text(row_index, 0),
                row_index,
            )
            try:
                link.click()
                JobVacancySearchResultsPage(self.browser).wait_until_available().collect(writer)
            except WebUIException:
                logger.exception("Failed to collect the vacancies on row %d", row_index)
            self.browser.back()
            self.wait_until_available()


class JobVacancySearchResultsPage(BasePage):
    """Vacancies of one occupation, possibly spread over several pages of the table."""

    KEY_LOCATOR = "#cphMainContent_grdVacancy"

    table = Table("#cphMainContent_grdVacancy")

    @property
    def page_count(self):
        return len(self.table.find_elements("tfoot table td")) or 1

    def go_to_page(self, page_index):
        link = self.table.find_element(
            f"tfoot table tbody tr td:nth-child({page_index + 1}) a"
        )
        link.click()
        # The pager reloads the table in place
        self.browser.sleep(3)
        self.wait_until_available()

    def collect(self, writer):
        page_count = self.page_count
        logger.info("The vacancies are spread over %d page(s)", page_count)
        for page_index in range(page_count):
            if page_index > 0:
                try:
                    self.go_to_page(page_index)
                except NoSuchElementException:
                    logger.warning("Cannot open page %d, skipping it", page_index + 1)
                    continue
            row_count = self.table.row_count
            logger.info("Page %d lists %d vacancies", page_index + 1, row_count)
            for row_index in range(row_count):
                try:
                    self.collect_vacancy(row_index, writer)
                except (NoSuchElementException, TimeoutException):
                    logger.exception("Failed to collect vacancy %d", row_index + 1)
                self.browser.back()
                self.wait_until_available()

    def collect_vacancy(self, row_index, writer):
        title, salary, job_type, department, posted, deadline = self.table.cell_texts(row_index)[
            :6
        ]
        TextLink(self.browser, f"#cphMainContent_grdVacancy_hypJobTitle_{row_index}").click()

        details = JobDetailsPage(self.browser).wait_until_available(timeout=10)
        control_number = details.control_number.text
        if details.working_title.exists(timeout=0):
            title = f"{title}<br/>{details.working_title.text}"

        logger.info("Writing %s: %s", control_number, title)
        info = [control_number, title, salary, job_type, department, posted, deadline]
        writer.write_table_row(info)
        writer.write(f'  <tr><td colspan="{len(info)}">\n')
        for text in details.description.texts:
            writer.write(f"    <p>{text}</p>\n")
        writer.write("  </td></tr>\n")


class JobDescriptionSection(ContainerElement):
    @property
    def texts(self):
        result = [e.inner_text() for e in self.find_elements("./p/span")]
        result.extend(e.inner_text() for e in self.find_elements("./ul/li"))
        if not result:
            result = [e.inner_text() for e in self.find_elements("./*")]
        for link in self.find_elements(".//a"):
            href = link.get_attribute("href")
            result.append(f'<a href="{href}">{href}</a>')
        return result


class JobDetailsPage(BasePage):
    KEY_LOCATOR = "#pnlJobDescription"

    description = JobDescriptionSection("#pnlJobDescription")
    control_number = Text("#lblDetailsJobControlNumber")
    working_title = Text("#lblWorkingTitle")


def search(app, job_title, output_dir):
    app.browser.navigate_to(app.url)
    results = JobSearchPage(app).wait_until_available().search(job_title)

    path = output_dir / f"{job_title}.html"
    logger.info("Writing the vacancies into %s", path)
    writer = SimpleHtmlWriter(path.open("w", encoding="utf-8"))
    try:
        writer.begin_html().begin_table().write_table_head(COLUMNS)
        results.collect(writer)
    finally:
        writer.end_table().end_html().close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    output_dir = Path(date.today().strftime("%m-%d"))
    output_dir.mkdir(exist_ok=True)

    browser = Browser(settings=Settings.from_env(), logger=logger)
    with CaStateJobsSearchApp(browser).launch() as app:
        for job_title in JOB_TITLES:
            logger.info("Searching the vacancies of %s", job_title)
            search(app, job_title, output_dir)


if __name__ == "__main__":
    main()
