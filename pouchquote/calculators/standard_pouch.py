"""
Standard pouch calculator: one sheet, one press run.

Covers three-side, stand-up, center/side seal and gusset bags (and their
double-up variants). Geometry → revolutions → seven cost lines.
"""

import logging

from ..schemas import Meterage, ProcessData, Rotation
from .base import BaseCalculator, CostResult, PouchJob
from .lookup import material_width, print_unit_price

logger = logging.getLogger(__name__)


class StandardPouchCalculator(BaseCalculator):

    def calculate_costs(self, job: PouchJob) -> CostResult:
        request = job.request
        costs = job.costs

        size = job.geometry.expand(request.bag_type_id, request.dimensions)
        layout = job.geometry.layout(size)
        r_loss = job.rotation.loss_revolutions(request.sku_count)
        run = job.rotation.run(request.quantity, size, layout, r_loss)

        # Pattern width across the web is one expanded sheet
        width = material_width(run.r_order, size.l_exp)
        feed_area = run.m_total * width / 1000

        file_fee = costs.file_fee(request.sku_count)
        if job.mode_coefficient == 0:
            print_cost = costs.waste_ink(run.r_loss)
        else:
            unit_price = print_unit_price(run.r_order, job.config.printing_tiers)
            print_cost = costs.print_run(unit_price, run.r_order, run.r_loss,
                                         job.mode_coefficient, job.double_print)
        print_cost += file_fee

        lines = {
            "material": costs.material(run.m_total, width, job.square_price_total),
            "lamination": costs.lamination(run.m_total, job.lamination_steps),
            "print": print_cost,
            "bag_making": costs.bag_making(job.bag_type, run.l_rev, run.r_order, run.r_loss, layout.n_row),
            "accessories": costs.accessories(request, layout.n_row,
                                             zipper_meters=run.m_order + run.m_loss,
                                             feed_meters=run.m_total),
            "special_process": costs.special_process(request, run.m_total, print_cost, file_fee),
            "custom": costs.custom(request),
            "file_fee": file_fee,
        }
        logger.debug("Standard branch %s: %s rows, roll %s mm", request.bag_type_id, layout.n_row, width)

        process_data = ProcessData(
            expand_size=size,
            layout=layout,
            rotation=Rotation(r_order=run.r_order, r_loss=run.r_loss),
            meterage=Meterage(l_rev=run.l_rev, m_order=run.m_order, m_loss=run.m_loss,
                              m_idle=run.m_idle, m_total=run.m_total),
            feed_area=feed_area,
            material_width=width,
            unit_area=job.unit_area,
        )
        return process_data, lines, None
