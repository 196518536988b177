"""
Demonstrations that execute each example's client code.
Each demonstration has a single responsibility: prove that one example
behaves the way its label (violation or compliant) says it does.
"""
from typing import Dict, List, Optional, Type

from .errors import (
    AuthenticationRequiredError, CollectionFullError, EngineNotRunningError,
    InvalidUserError, UnknownPaymentTypeError, UnsupportedOperationError
)
from .interfaces import COMPLIANT, VIOLATION, Demonstration, DemoResult, Logger
from .logging import log_error, log_info
from .principles import DIP, ISP, LSP, OCP, SRP, PRINCIPLE_CODES
from .principles import dip, isp, lsp_fixed, lsp_violations, ocp, srp, vehicles


class _RecordingLogger:
    """Collects log lines so a demonstration can inspect what was logged"""

    def __init__(self):
        self.lines: List[str] = []

    def info(self, message: str) -> None:
        self.lines.append(message)

    def error(self, message: str) -> None:
        self.lines.append(message)

    def debug(self, message: str) -> None:
        self.lines.append(message)


# SRP


class UserManagerDemonstration(Demonstration):
    principle = SRP
    name = "UserManager does everything"
    label = VIOLATION

    def run(self) -> DemoResult:
        logger = _RecordingLogger()
        manager = srp.UserManager(logger)
        manager.register_user(srp.User("Ada", "ada@example.com", "secret"))

        # One class validated, stored, mailed and logged
        concerns = {
            "storage backend": "ada@example.com" in manager.users,
            "email content": len(manager.sent_emails) == 1,
            "log format": any(line.endswith("User registered: ada@example.com") for line in logger.lines),
        }
        rejected = False
        try:
            manager.register_user(srp.User("Nobody"))
        except InvalidUserError:
            rejected = True
        concerns["validation rules"] = rejected

        handled = [name for name, done in concerns.items() if done]
        return self.result(
            holds=len(handled) == len(concerns),
            observations=[f"UserManager handled {len(handled)} concerns itself: {', '.join(handled)}"],
            expected=1,
            actual=len(handled)
        )


class UserServiceDemonstration(Demonstration):
    principle = SRP
    name = "UserService delegates each concern"
    label = COMPLIANT

    def run(self) -> DemoResult:
        service = srp.build_user_service()
        service.register_user(srp.User("Ada", "ada@example.com", "secret"))

        observations = [
            f"saved users: {service.repository.count()}",
            f"welcome subject: {service.email_service.outbox[0].subject}",
        ]
        rejected = False
        try:
            service.register_user(srp.User("Nobody"))
        except InvalidUserError:
            rejected = True
            observations.append("invalid user rejected by UserValidator")

        holds = (
            service.repository.count() == 1
            and len(service.email_service.outbox) == 1
            and service.activity_logger.lines[-1].endswith("User registered: ada@example.com")
            and rejected
        )
        return self.result(holds, observations)


# OCP


class PaymentProcessorDemonstration(Demonstration):
    principle = OCP
    name = "PaymentProcessor branches on type"
    label = VIOLATION

    def run(self) -> DemoResult:
        processor = ocp.PaymentProcessor()
        observations = [processor.process_payment("CREDIT"), processor.process_payment("DEBIT")]
        try:
            processor.process_payment("CRYPTO")
        except UnknownPaymentTypeError as e:
            observations.append(f"new type needs a code change: {e}")
            return self.result(True, observations)
        return self.result(False, observations)


class PaymentMethodDemonstration(Demonstration):
    principle = OCP
    name = "PaymentMethod extension"
    label = COMPLIANT

    def run(self) -> DemoResult:
        service = ocp.PaymentService()
        methods = [ocp.CreditPayment(), ocp.DebitPayment(), ocp.CryptoPayment()]
        expected = [
            "Charged 25.00 to credit card",
            "Debited 25.00 from bank account",
            "Transferred 25.00 worth of BTC",
        ]
        receipts = [service.checkout(method, 25.0) for method in methods]
        return self.result(
            holds=receipts == expected and service.receipts == expected,
            observations=[str(receipt) for receipt in receipts],
            expected=expected,
            actual=receipts
        )


# LSP


class RectangleSquareViolation(Demonstration):
    principle = LSP
    name = "Square extends Rectangle"
    label = VIOLATION

    def run(self) -> DemoResult:
        expected = lsp_violations.measure_rectangle(lsp_violations.Rectangle())
        actual = lsp_violations.measure_rectangle(lsp_violations.Square())
        return self.result(
            holds=expected == 20 and actual != expected,
            observations=[f"Rectangle area: {expected}", f"Square area: {actual}"],
            expected=expected,
            actual=actual
        )


class BirdViolation(Demonstration):
    principle = LSP
    name = "Ostrich extends Bird"
    label = VIOLATION

    def run(self) -> DemoResult:
        observations = [lsp_violations.try_to_fly(lsp_violations.Duck())]
        try:
            lsp_violations.try_to_fly(lsp_violations.Ostrich())
        except UnsupportedOperationError as e:
            observations.append(f"Ostrich: {e}")
            return self.result(True, observations)
        return self.result(False, observations)


class SecuredFileViolation(Demonstration):
    principle = LSP
    name = "SecuredFile strengthens read precondition"
    label = VIOLATION

    def run(self) -> DemoResult:
        observations = [lsp_violations.read_file(lsp_violations.ReadOnlyFile())]
        try:
            lsp_violations.read_file(lsp_violations.SecuredFile())
        except AuthenticationRequiredError as e:
            observations.append(f"SecuredFile: {e}")
            return self.result(True, observations)
        return self.result(False, observations)


class FixedSizeArrayViolation(Demonstration):
    principle = LSP
    name = "FixedSizeArray limits ArrayCollection"
    label = VIOLATION

    def run(self) -> DemoResult:
        count = lsp_violations.FixedSizeArray.MAX_SIZE + 1
        observations = [f"ArrayCollection size: {lsp_violations.add_many(lsp_violations.ArrayCollection(), count)}"]
        try:
            lsp_violations.add_many(lsp_violations.FixedSizeArray(), count)
        except CollectionFullError as e:
            observations.append(f"FixedSizeArray: {e}")
            return self.result(True, observations)
        return self.result(False, observations)


class ShapeFix(Demonstration):
    principle = LSP
    name = "Rectangle and Square as Shapes"
    label = COMPLIANT

    def run(self) -> DemoResult:
        rectangle = lsp_fixed.Rectangle(5, 4)
        square = lsp_fixed.Square(5)
        return self.result(
            holds=rectangle.area() == 20 and square.area() == 25,
            observations=[lsp_fixed.describe_area(rectangle), lsp_fixed.describe_area(square)]
        )


class AnimalFix(Demonstration):
    principle = LSP
    name = "Flyable split from Animal"
    label = COMPLIANT

    def run(self) -> DemoResult:
        animals = [lsp_fixed.Duck(), lsp_fixed.Ostrich()]
        observations = [lsp_fixed.move_animal(animal) for animal in animals]
        flyers = [animal for animal in animals if isinstance(animal, lsp_fixed.Flyable)]
        observations.extend(lsp_fixed.make_fly(flyer) for flyer in flyers)
        return self.result(len(flyers) == 1, observations)


class FileReaderFix(Demonstration):
    principle = LSP
    name = "SecuredFileReader by composition"
    label = COMPLIANT

    def run(self) -> DemoResult:
        basic = lsp_fixed.BasicFileReader("notes.txt")
        auth = lsp_fixed.AuthenticationService()
        secured = lsp_fixed.SecuredFileReader(basic, auth)
        auth.login()
        observations = [f"basic: {basic.read()}", f"secured after login: {secured.read()}"]
        return self.result(basic.read() == secured.read(), observations)


class CollectionFix(Demonstration):
    principle = LSP
    name = "Collection with explicit capacity"
    label = COMPLIANT

    def run(self) -> DemoResult:
        dynamic = lsp_fixed.DynamicArray()
        fixed = lsp_fixed.FixedArray(10)
        dynamic_added = lsp_fixed.fill_collection(dynamic, 11)
        fixed_added = lsp_fixed.fill_collection(fixed, 11)
        rejected = fixed.add("overflow")
        return self.result(
            holds=dynamic_added == 11 and fixed_added == 10 and rejected is False,
            observations=[
                f"DynamicArray accepted {dynamic_added}",
                f"FixedArray accepted {fixed_added}, add when full returned {rejected}",
            ]
        )


class VehicleHierarchy(Demonstration):
    principle = LSP
    name = "Vehicles split by engine capability"
    label = COMPLIANT

    def run(self) -> DemoResult:
        observations = []
        for vehicle in (vehicles.Bicycle(), vehicles.Skateboard()):
            observations.append(f"{type(vehicle).__name__} speed: {vehicles.drive(vehicle)}")

        car = vehicles.Car()
        electric = vehicles.ElectricCar(battery_level=3)
        speeds = [vehicles.run_engine_cycle(car), vehicles.run_engine_cycle(electric)]
        observations.append(f"Car reached {speeds[0]}, ElectricCar reached {speeds[1]}")

        engine_guarded = False
        try:
            vehicles.drive(vehicles.Car())
        except EngineNotRunningError:
            engine_guarded = True
            observations.append("Car refuses to move with engine off")

        holds = (
            speeds == [10, 0]
            and car.speed == 0
            and electric.battery_level == 2
            and engine_guarded
        )
        return self.result(holds, observations)


# ISP


class FatPrinterViolation(Demonstration):
    principle = ISP
    name = "BasicPrinter implements MultiFunctionPrinter"
    label = VIOLATION

    def run(self) -> DemoResult:
        printer = isp.BasicPrinter()
        refused = []
        for operation in ("scan", "fax", "photocopy", "color_print", "staple"):
            try:
                getattr(printer, operation)()
            except UnsupportedOperationError:
                refused.append(operation)
        return self.result(
            holds=len(refused) == 5,
            observations=[f"unsupported: {', '.join(refused)}"],
            expected=0,
            actual=len(refused)
        )


class RoleInterfacesFix(Demonstration):
    principle = ISP
    name = "Printers implement role interfaces"
    label = COMPLIANT

    def run(self) -> DemoResult:
        devices = [
            isp.SimpleHomePrinter(), isp.OfficePrinter(),
            isp.EnterpriseMultiFunction(), isp.PhotocopierDevice(),
            isp.Human(), isp.Robot(),
        ]
        observations = [
            f"{type(device).__name__}: {', '.join(isp.supported_capabilities(device))}"
            for device in devices
        ]
        copies = isp.PhotocopierDevice().photocopy()
        observations.append(f"PhotocopierDevice.photocopy: {' + '.join(copies)}")
        holds = (
            isp.supported_capabilities(isp.Robot()) == ["Workable"]
            and copies == ["Scanning", "Printing"]
        )
        return self.result(holds, observations)


# DIP


class HardWiredDatabaseViolation(Demonstration):
    principle = DIP
    name = "DataReader creates MySQLDatabase"
    label = VIOLATION

    def run(self) -> DemoResult:
        reader = dip.DataReader()
        return self.result(
            holds=isinstance(reader.database, dip.MySQLDatabase),
            observations=[reader.read_data(), "no way to inject another database"]
        )


class InjectedDatabaseFix(Demonstration):
    principle = DIP
    name = "ImprovedDataReader receives a Database"
    label = COMPLIANT

    def run(self) -> DemoResult:
        readings = [
            dip.ImprovedDataReader(database).read_data()
            for database in (dip.MySQLDatabaseImpl(), dip.PostgreSQLDatabaseImpl())
        ]
        return self.result(readings == ["Data from MySQL", "Data from PostgreSQL"], readings)


class StorageServiceFix(Demonstration):
    principle = DIP
    name = "DataManager depends on StorageService"
    label = COMPLIANT

    def run(self) -> DemoResult:
        cloud = dip.CloudStorageService()
        local = dip.LocalStorageService()
        dip.DataManager(cloud).save_data("Data saved in the cloud")
        dip.DataManager(local).save_data("Data saved locally")
        return self.result(
            holds=cloud.provider.objects == ["Data saved in the cloud"]
            and "Data saved locally" in local.file_system.files["data.txt"],
            observations=["cloud and local storage swapped without touching DataManager"]
        )


class NotificationFix(Demonstration):
    principle = DIP
    name = "NotificationService over MessageService"
    label = COMPLIANT

    def run(self) -> DemoResult:
        email = dip.EmailService()
        sms = dip.SMSService()
        observations = [
            dip.NotificationService(email).notify("user@example.com", "Hello via email!"),
            dip.NotificationService(sms).notify("+1234567890", "Hello via SMS!"),
        ]
        return self.result(len(email.sent) == 1 and len(sms.sent) == 1, observations)


DEFAULT_DEMONSTRATIONS: List[Type[Demonstration]] = [
    UserManagerDemonstration, UserServiceDemonstration,
    PaymentProcessorDemonstration, PaymentMethodDemonstration,
    RectangleSquareViolation, BirdViolation, SecuredFileViolation, FixedSizeArrayViolation,
    ShapeFix, AnimalFix, FileReaderFix, CollectionFix, VehicleHierarchy,
    FatPrinterViolation, RoleInterfacesFix,
    HardWiredDatabaseViolation, InjectedDatabaseFix, StorageServiceFix, NotificationFix,
]


class DemonstrationRegistry:
    """Keeps demonstrations grouped by principle and runs them"""

    def __init__(self, logger: Optional[Logger] = None):
        self._demonstrations: Dict[str, List[Demonstration]] = {}
        self.logger = logger

    def register(self, demonstration: Demonstration) -> None:
        if demonstration.principle not in PRINCIPLE_CODES:
            raise ValueError(f"Unknown principle: {demonstration.principle}")
        self._demonstrations.setdefault(demonstration.principle, []).append(demonstration)

    def principles(self) -> List[str]:
        return [code for code in PRINCIPLE_CODES if code in self._demonstrations]

    def for_principle(self, code: str) -> List[Demonstration]:
        return list(self._demonstrations.get(code.upper(), []))

    def run_principle(self, code: str) -> List[DemoResult]:
        return [self._run_one(demo) for demo in self.for_principle(code)]

    def run_all(self) -> List[DemoResult]:
        results = []
        for code in self.principles():
            results.extend(self.run_principle(code))
        failed = sum(1 for result in results if not result.holds)
        log_info(self.logger, f"Ran {len(results)} demonstrations, {failed} failed")
        return results

    def __len__(self) -> int:
        return sum(len(demos) for demos in self._demonstrations.values())

    def _run_one(self, demonstration: Demonstration) -> DemoResult:
        try:
            result = demonstration.run()
        except Exception as e:
            log_error(self.logger, f"{demonstration.name} raised unexpectedly: {e}")
            result = demonstration.result(False, [f"unexpected {type(e).__name__}"])
            result.error = str(e)
            return result

        status = "ok" if result.holds else "FAILED"
        log_info(self.logger, f"[{result.principle}] {result.example} ({result.label}): {status}")
        return result


def default_registry(logger: Optional[Logger] = None) -> DemonstrationRegistry:
    """Registry populated with every bundled example"""
    registry = DemonstrationRegistry(logger)
    for demo_class in DEFAULT_DEMONSTRATIONS:
        registry.register(demo_class())
    return registry
