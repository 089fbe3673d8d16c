"""
Frame Export

Generate PDF scoresheets for a snooker frame.
Also supports CSV export for data analysis.
"""

import csv
import logging
from datetime import datetime

from reportlab.lib.pagesizes import A4
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import (
    SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
)
from reportlab.lib.enums import TA_CENTER

from config import APP_NAME

logger = logging.getLogger(__name__)


def build_frame_data(engine) -> dict:
    """
    Collect everything the exporters need from a FrameEngine.

    Returns:
        Dictionary with date, settings, per-player standings and the action log
    """
    standings = engine.final_standings
    winner = ""
    if engine.game_over and standings and not engine.is_tie_for_lead:
        winner = standings[0].name

    return {
        "date": datetime.now().strftime("%Y-%m-%d %H:%M"),
        "foul_award_policy": engine.foul_award_policy.title,
        "enforce_rules": engine.enforce_rules,
        "reds_remaining": engine.reds_remaining,
        "status": engine.phase.value.replace("_", " ").title(),
        "winner": winner,
        "players": [
            {
                "name": p.name,
                "score": p.score,
                "highest_break": engine.highest_break(p.id),
                "fouls": engine.foul_count(p.id),
            }
            for p in standings
        ],
        "actions": [
            {
                "number": i + 1,
                "player": engine.player_name(action.player_id),
                "type": "Foul" if action.is_foul else "Pot",
                "ball": "" if action.is_foul else action.kind.ball_name,
                "points": action.points,
                "description": engine.describe_action(action),
            }
            for i, action in enumerate(engine.action_history)
        ],
    }


class FrameExporter:
    """
    Generate frame scoresheets.

    Supports:
    - PDF scoresheet with standings and the shot log
    - CSV data export
    """

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self) -> None:
        """Set up custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='FrameTitle',
            parent=self.styles['Heading1'],
            fontSize=22,
            alignment=TA_CENTER,
            spaceAfter=16,
        ))

        self.styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=self.styles['Heading2'],
            fontSize=14,
            spaceBefore=15,
            spaceAfter=10,
        ))

    def export_pdf(self, frame_data: dict, filepath: str) -> bool:
        """
        Export a frame scoresheet as PDF.

        Args:
            frame_data: Dictionary built by build_frame_data
            filepath: Output file path

        Returns:
            True if export successful, False otherwise
        """
        try:
            doc = SimpleDocTemplate(
                filepath,
                pagesize=A4,
                rightMargin=1*cm,
                leftMargin=1*cm,
                topMargin=1*cm,
                bottomMargin=1*cm,
            )

            elements = []

            elements.append(Paragraph("Snooker Frame Scoresheet", self.styles['FrameTitle']))

            info = [
                ["Date:", frame_data.get("date", "")],
                ["Status:", frame_data.get("status", "")],
                ["Foul points to:", frame_data.get("foul_award_policy", "")],
                ["Rules enforced:", "Yes" if frame_data.get("enforce_rules") else "No"],
                ["Winner:", frame_data.get("winner") or "-"],
            ]
            info_table = Table(info, colWidths=[4*cm, 10*cm])
            info_table.setStyle(TableStyle([
                ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
                ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
                ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
            ]))
            elements.append(info_table)

            elements.append(Paragraph("Final Score", self.styles['SectionHeader']))

            standings = [["Player", "Score", "Highest Break", "Fouls"]]
            for p in frame_data.get("players", []):
                standings.append([p["name"], str(p["score"]),
                                  str(p["highest_break"]), str(p["fouls"])])

            standings_table = Table(standings, colWidths=[6*cm, 3*cm, 4*cm, 3*cm])
            standings_table.setStyle(TableStyle([
                ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
                ('ALIGN', (1, 0), (-1, -1), 'CENTER'),
                ('GRID', (0, 0), (-1, -1), 1, colors.black),
                ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
                ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
                ('TOPPADDING', (0, 0), (-1, -1), 6),
            ]))
            elements.append(standings_table)

            actions = frame_data.get("actions", [])
            if actions:
                elements.append(Paragraph("Frame History", self.styles['SectionHeader']))
                log = [["#", "Entry"]]
                for a in actions:
                    log.append([str(a["number"]), a["description"]])
                log_table = Table(log, colWidths=[1.5*cm, 14.5*cm])
                log_table.setStyle(TableStyle([
                    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
                    ('FONTSIZE', (0, 0), (-1, -1), 9),
                    ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
                    ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
                ]))
                elements.append(log_table)

            elements.append(Spacer(1, 1*cm))
            elements.append(Paragraph(
                f"Generated by {APP_NAME}",
                ParagraphStyle(
                    name='Footer',
                    fontSize=8,
                    alignment=TA_CENTER,
                    textColor=colors.grey,
                )
            ))

            doc.build(elements)
            logger.info("PDF scoresheet written to %s", filepath)
            return True

        except Exception:
            logger.exception("PDF export failed: %s", filepath)
            return False

    def export_csv(self, frame_data: dict, filepath: str) -> bool:
        """
        Export frame data as CSV for analysis.

        Args:
            frame_data: Dictionary built by build_frame_data
            filepath: Output file path

        Returns:
            True if export successful, False otherwise
        """
        try:
            with open(filepath, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)

                writer.writerow(["Snooker Frame Export"])
                writer.writerow([])

                writer.writerow(["Frame Information"])
                writer.writerow(["Date", frame_data.get("date", "")])
                writer.writerow(["Status", frame_data.get("status", "")])
                writer.writerow(["Foul Points To", frame_data.get("foul_award_policy", "")])
                writer.writerow(["Rules Enforced", frame_data.get("enforce_rules", False)])
                writer.writerow(["Reds Remaining", frame_data.get("reds_remaining", 0)])
                writer.writerow(["Winner", frame_data.get("winner", "")])
                writer.writerow([])

                writer.writerow(["Players"])
                writer.writerow(["Name", "Score", "Highest Break", "Fouls"])
                for p in frame_data.get("players", []):
                    writer.writerow([p["name"], p["score"], p["highest_break"], p["fouls"]])
                writer.writerow([])

                actions = frame_data.get("actions", [])
                if actions:
                    writer.writerow(["Frame History"])
                    writer.writerow(["#", "Player", "Type", "Ball", "Points"])
                    for a in actions:
                        writer.writerow([a["number"], a["player"], a["type"],
                                         a["ball"], a["points"]])

            logger.info("CSV export written to %s", filepath)
            return True

        except OSError:
            logger.exception("CSV export failed: %s", filepath)
            return False
