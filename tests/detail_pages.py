"""
Builders for schedule detail pages used by the tests.

The markup follows the registration system's layout: a detail table with a
"ddlabel" heading cell and a "dddefault" cell that holds the labeled lines,
the seat table and the requirement blocks, all separated by <br/> tags.
"""

from __future__ import annotations

from typing import Optional, Sequence

SEAT_HEADER_ROW = (
    '<tr><td class="dddead">&nbsp;</td><th class="ddheader" scope="col">Capacity</th>'
    '<th class="ddheader" scope="col">Actual</th><th class="ddheader" scope="col">Remaining</th></tr>'
)


def seat_row(label: str, capacity: int, taken: int, remaining: int) -> str:
    return (
        f'<tr><th class="ddlabel" scope="row"><span class="fieldlabeltext">{label}</span></th>'
        f'<td class="dddefault">{capacity}</td><td class="dddefault">{taken}</td>'
        f'<td class="dddefault">{remaining}</td></tr>'
    )


def seat_table(rows: Optional[Sequence[str]] = None, tbody: bool = False) -> str:
    if rows is None:
        rows = [SEAT_HEADER_ROW, seat_row("Seats", 30, 28, 2), seat_row("Waitlist Seats", 10, 0, 10)]
    body = "".join(rows)
    if tbody:
        body = f"<tbody>{body}</tbody>"
    return (
        '<table class="datadisplaytable" summary="This layout table is used to present the seating numbers." '
        'width="50%"><caption class="captiontext">Registration Availability</caption>'
        f"{body}</table>"
    )


DEFAULT_REQUIREMENTS = """
<span class="fieldlabeltext">Restrictions: </span><br/>
Must be enrolled in one of the following Colleges:     <br/>
&nbsp;&nbsp;&nbsp;&nbsp;&nbsp;College of Engineering<br/>
<br/>
<span class="fieldlabeltext">Prerequisites: </span><br/>
Undergraduate level <a href="/prod/bwckctlg.p_display_courses?subj=CS&amp;crse=17700">CS 17700</a> Minimum Grade of C<br/>
"""


def detail_table(
    basic_info: str = "Intro to CS - 12345 - CS 18000 - 001",
    term: str = "Fall 2012",
    levels: str = "Graduate, Professional, Undergraduate",
    campus: str = "West Lafayette Campus",
    schedule_type: str = "Lecture Schedule Type",
    credits: str = "3.000 Credits",
    seats: Optional[str] = None,
    requirements: str = DEFAULT_REQUIREMENTS,
) -> str:
    if seats is None:
        seats = seat_table()
    return f"""
<table class="datadisplaytable" summary="This table is used to present the detailed class information." width="100%">
<caption class="captiontext">Detailed Class Information</caption>
<tr>
<th class="ddlabel" scope="row">{basic_info}<br><br></th>
</tr>
<tr>
<td class="dddefault">
<span class="fieldlabeltext">Associated Term: </span>{term} <br/>
<span class="fieldlabeltext">Registration Dates: </span>Mar 26, 2012 to Aug 26, 2012 <br/>
<span class="fieldlabeltext">Levels: </span>{levels} <br/>
<br/>
{campus}
<br/>
{schedule_type}
<br/>
       {credits}
<br/>
{seats}
<br/>
{requirements}
</td>
</tr>
</table>
"""


def page(*tables: str) -> str:
    body = "\n".join(tables)
    return f"""<!DOCTYPE html>
<html lang="en">
<head><title>Class Schedule Listing</title></head>
<body>
<div class="pagebodydiv">
{body}
</div>
</body>
</html>
"""


def not_found_page(message: str = "No detailed class information found") -> str:
    return page(
        '<table class="infotexttable" summary="This layout table holds message information">'
        '<tr><td class="indefault"><img src="/wtlgifs/twgginfo.gif" alt="Information" class="headerImg"/></td>'
        f'<td class="indefault"><span class="infotext">{message}</span></td></tr></table>'
    )
