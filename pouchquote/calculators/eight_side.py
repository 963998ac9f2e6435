"""
Eight-side pouch calculator.

An eight-side bag is printed as two separate panels: the body strip
(front + back + bottom) and the side gussets. Each panel gets its own
geometry, layout and press run; the two runs are then merged into the same
result shape the standard calculator returns, plus a per-panel drill-down.
"""

import logging

from ..schemas import EightSideDiagnostics, Meterage, PanelDiagnostics, ProcessData, Rotation
from .base import BaseCalculator, CostResult, PouchJob
from .lookup import material_width, print_unit_price

logger = logging.getLogger(__name__)


def _panel(size, layout, run) -> PanelDiagnostics:
    return PanelDiagnostics(
        l_exp=size.l_exp,
        w_exp=size.w_exp,
        n_circ=layout.n_circ,
        n_row=layout.n_row,
        l_rev=run.l_rev,
        r_order=run.r_order,
        r_loss=run.r_loss,
        m_total=run.m_total,
    )


class EightSidePouchCalculator(BaseCalculator):

    BODY_FOLD_OVERHEAD = 1.05      # extra body meterage lost to folding
    PRINT_AREA_ALLOWANCE = 1.02

    def calculate_costs(self, job: PouchJob) -> CostResult:
        request = job.request
        costs = job.costs
        geometry = job.geometry
        rotation = job.rotation

        body_size = geometry.expand_body_panel(request.dimensions)
        body_layout = geometry.layout(body_size)
        body_loss = rotation.loss_revolutions(request.sku_count, eight_side=True)
        body = rotation.run(request.quantity, body_size, body_layout, body_loss)

        side_size = geometry.expand_side_panel(request.dimensions)
        side_layout = geometry.layout(side_size)
        side_loss = rotation.side_panel_loss(body_layout, side_layout, body_loss, request.is_side_print)
        side = rotation.run(request.quantity, side_size, side_layout, side_loss)

        body_meters = body.m_total * self.BODY_FOLD_OVERHEAD
        total_meter = side.m_total + body_meters
        total_order_rev = body.r_order + side.r_order
        total_loss_rev = body.r_loss + side.r_loss

        # Body sheets sit side by side across the web
        width = material_width(total_order_rev, body_size.l_exp * body_layout.n_row, eight_side=True)
        print_area = total_meter * width * self.PRINT_AREA_ALLOWANCE / 1000

        body_material = costs.material(body_meters, width, job.square_price_total)
        side_material = costs.material(side.m_total, width, job.square_price_total)

        file_fee = costs.file_fee(request.sku_count)
        body_print = side_print = 0.0
        if job.mode_coefficient == 0:
            print_cost = costs.waste_ink(total_loss_rev)
        else:
            unit_price = print_unit_price(total_order_rev, job.config.printing_tiers)
            body_print = costs.print_run(unit_price, body.r_order, body.r_loss,
                                         job.mode_coefficient, job.double_print)
            if request.is_side_print:
                side_print = costs.print_run(unit_price, side.r_order, side.r_loss,
                                             job.mode_coefficient, job.double_print)
            print_cost = body_print + side_print
        print_cost += file_fee

        lines = {
            "material": body_material + side_material,
            "lamination": costs.lamination(total_meter, job.lamination_steps),
            "print": print_cost,
            # Side seams add no separate making charge
            "bag_making": costs.bag_making(job.bag_type, body.l_rev, body.r_order, body.r_loss, body_layout.n_row),
            "accessories": costs.accessories(request, body_layout.n_row,
                                             zipper_meters=total_meter,
                                             feed_meters=total_meter),
            "special_process": costs.special_process(request, total_meter, print_cost, file_fee),
            "custom": costs.custom(request),
            "file_fee": file_fee,
        }
        logger.debug("Eight-side branch %s: body %s revs/cycle, side %s, side loss %s, %.1f m",
                     request.bag_type_id, body_layout.n_rev, side_layout.n_rev, side_loss, total_meter)

        process_data = ProcessData(
            expand_size=body_size,
            layout=body_layout,
            rotation=Rotation(r_order=total_order_rev, r_loss=total_loss_rev),
            meterage=Meterage(
                l_rev=body.l_rev,
                m_order=body.m_order + side.m_order,
                m_loss=body.m_loss + side.m_loss,
                m_idle=body.m_idle + side.m_idle,
                m_total=total_meter,
            ),
            feed_area=print_area,
            material_width=width,
            unit_area=job.unit_area,
        )
        diagnostics = EightSideDiagnostics(
            bag_body=_panel(body_size, body_layout, body),
            bag_side=_panel(side_size, side_layout, side),
            total_meter=total_meter,
            total_order_rev=total_order_rev,
            total_loss_rev=total_loss_rev,
            material_width=width,
            print_area=print_area,
            bag_body_material_cost=body_material,
            bag_side_material_cost=side_material,
            bag_body_print_cost=body_print,
            bag_side_print_cost=side_print,
        )
        return process_data, lines, diagnostics
